"""
Pytest 配置文件
提供测试 fixtures
"""
import os
import sys
import pytest

# 添加项目路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'apiSystem'))

# 设置 Django 配置
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'apiSystem.settings')


@pytest.fixture(autouse=True)
def _reset_service_locator():
    """每个测试前后清空 ServiceLocator，避免测试之间共享注入的服务"""
    from apps.core.interfaces import ServiceLocator
    ServiceLocator.clear()
    yield
    ServiceLocator.clear()


@pytest.fixture
def api_client():
    """提供 API 测试客户端"""
    from django.test import Client
    return Client()


@pytest.fixture
def contract_factory(db):
    """
    提供合同工厂

    使用方法：
        contract = contract_factory(contract_number="CON-1", status=ContractStatus.APPROVED)
    """
    from apps.contracts.models import Contract
    from apps.core.enums import ContractStatus

    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        data = {
            "contract_number": f"CON-{counter['n']:04d}",
            "contract_version": 1,
            "ukprn": 10000000 + counter["n"],
            "title": f"Fixture测试合同{counter['n']}",
            "status": ContractStatus.PUBLISHED_TO_PROVIDER,
        }
        data.update(overrides)
        return Contract.objects.create(**data)

    return _create


# ========== Hypothesis 配置 ==========

from hypothesis import settings, Verbosity

# 配置 Hypothesis
settings.register_profile("default", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=10, verbosity=Verbosity.verbose)

# 加载配置（默认使用 default）
profile = os.getenv('HYPOTHESIS_PROFILE', 'default')
settings.load_profile(profile)


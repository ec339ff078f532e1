"""
ContractMapper 单元测试
"""
from datetime import date, datetime, timedelta, timezone

from hypothesis import given, strategies as st

from apps.contracts.mappers import ContractMapper
from apps.contracts.models import Contract
from apps.contracts.schemas import ContractOut, ContractReminderItem
from apps.core.enums import ContractStatus
from tests.mocks import build_contract


class TestContractMapper:

    def setup_method(self):
        self.mapper = ContractMapper()

    def test_maps_all_fields(self):
        contract = build_contract(
            id=3,
            contract_number="CON-3",
            contract_version=2,
            ukprn=10099999,
            title="成人教育合同",
            status=ContractStatus.APPROVED,
            funding_type="AEB",
            year="2324",
            start_date=date(2023, 8, 1),
            end_date=date(2024, 7, 31),
            signed_on=datetime(2023, 7, 1, 10, 0, tzinfo=timezone.utc),
            last_email_reminder_sent=datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc),
        )

        out = self.mapper.to_contract_out(contract)

        assert out.id == 3
        assert out.contract_number == "CON-3"
        assert out.contract_version == 2
        assert out.ukprn == 10099999
        assert out.title == "成人教育合同"
        assert out.status == "Approved"
        assert out.status_label == str(ContractStatus.APPROVED.label)
        assert out.funding_type == "AEB"
        assert out.year == "2324"
        assert out.start_date == date(2023, 8, 1)
        assert out.end_date == date(2024, 7, 31)
        assert out.signed_on == datetime(2023, 7, 1, 10, 0, tzinfo=timezone.utc)
        assert out.created_at == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
        assert out.last_email_reminder_sent == datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc)

    def test_naive_datetime_treated_as_utc(self):
        contract = build_contract(created_at=datetime(2024, 2, 1, 12, 0))

        out = self.mapper.to_contract_out(contract)

        assert out.created_at == datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)
        assert out.created_at.tzinfo is not None

    def test_aware_datetime_converted_to_utc(self):
        tz = timezone(timedelta(hours=2))
        contract = build_contract(last_updated_at=datetime(2024, 2, 1, 12, 0, tzinfo=tz))

        out = self.mapper.to_contract_out(contract)

        assert out.last_updated_at.utcoffset() == timedelta(0)
        assert out.last_updated_at == datetime(2024, 2, 1, 10, 0, tzinfo=timezone.utc)

    def test_unknown_status_has_no_label(self):
        out = self.mapper.to_contract_out(build_contract(status="Legacy"))

        assert out.status == "Legacy"
        assert out.status_label is None

    def test_mapping_does_not_mutate_input(self):
        naive = datetime(2024, 2, 1, 12, 0)
        contract = build_contract(created_at=naive)

        self.mapper.to_contract_out(contract)

        assert contract.created_at is naive

    def test_reminder_items_keep_order(self):
        contracts = [build_contract(id=i, contract_number=f"CON-{i}") for i in (5, 2, 9)]

        items = self.mapper.to_reminder_items(contracts)

        assert [item.id for item in items] == [5, 2, 9]
        assert items[0].contract_number == "CON-5"
        assert items[0].last_email_reminder_sent is None

    def test_empty_list(self):
        assert self.mapper.to_contract_out_list([]) == []


# ========== 字段覆盖属性测试 ==========

MODEL_FIELDS = {f.attname for f in Contract._meta.concrete_fields}

# 由其他字段推导、没有对应模型字段的输出字段
DERIVED_FIELDS = {"status_label"}

utc_datetimes = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
)
short_text = st.text(max_size=20)

contracts = st.builds(
    build_contract,
    id=st.integers(min_value=1, max_value=10 ** 9),
    contract_number=st.text(min_size=1, max_size=20),
    contract_version=st.integers(min_value=1, max_value=1000),
    ukprn=st.integers(min_value=10_000_000, max_value=99_999_999),
    title=short_text,
    status=st.sampled_from(ContractStatus.values),
    funding_type=short_text,
    year=st.text(max_size=4),
    start_date=st.none() | st.dates(),
    end_date=st.none() | st.dates(),
    signed_on=st.none() | utc_datetimes,
    created_at=utc_datetimes,
    last_updated_at=utc_datetimes,
    last_email_reminder_sent=st.none() | utc_datetimes,
)


def test_every_model_field_has_contract_out_destination():
    assert MODEL_FIELDS - set(ContractOut.model_fields) == set()
    assert set(ContractOut.model_fields) - MODEL_FIELDS == DERIVED_FIELDS


def test_reminder_item_fields_come_from_model():
    assert set(ContractReminderItem.model_fields) <= MODEL_FIELDS


@given(contract=contracts)
def test_contract_out_copies_every_field(contract):
    out = ContractMapper().to_contract_out(contract)

    for name in MODEL_FIELDS:
        assert getattr(out, name) == getattr(contract, name), name
    assert out.status_label == str(ContractStatus(contract.status).label)


@given(contract=contracts)
def test_reminder_item_copies_its_fields(contract):
    item = ContractMapper().to_reminder_item(contract)

    for name in ContractReminderItem.model_fields:
        assert getattr(item, name) == getattr(contract, name), name

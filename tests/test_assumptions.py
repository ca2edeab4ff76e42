import logging

import pytest

from wealth_projection.data_model import (
    AssumptionTableModel,
    Assumptions,
    ConfigurationError,
    apply_overrides,
    assumption_names,
    dataframe_to_overrides,
    normalize_key,
)


def test_defaults_describe_reference_household():
    cfg = Assumptions()

    assert cfg.current_age == 31
    assert cfg.jamie_start_age == 36
    assert cfg.jamie_end_age == 45
    assert cfg.land_purchases() == ((34, 15.0), (40, 100.0))
    assert list(cfg.age_range()) == list(range(31, 86))


@pytest.mark.parametrize("value", ["31", None, True, [31]])
def test_non_numeric_values_fail_fast(value):
    with pytest.raises(ConfigurationError) as excinfo:
        Assumptions(current_age=value)

    assert excinfo.value.field == "current_age"


def test_non_numeric_rate_is_rejected():
    with pytest.raises(ConfigurationError, match="primary_return"):
        Assumptions(primary_return="ten")


def test_integral_float_ages_are_stored_as_int():
    cfg = Assumptions(current_age=31.0)

    assert cfg.current_age == 31
    assert isinstance(cfg.current_age, int)


def test_fractional_age_is_rejected():
    with pytest.raises(ConfigurationError):
        Assumptions(move_out_age=34.5)


def test_degenerate_ranges_are_accepted():
    cfg = Assumptions(jamie_start_age=40, jamie_end_age=35, land_purchase_1_age=10)

    assert cfg.jamie_end_age < cfg.jamie_start_age


def test_normalize_key_accepts_camel_case_and_aliases():
    assert normalize_key("jamieStartAge") == "jamie_start_age"
    assert normalize_key("landPurchase1Age") == "land_purchase_1_age"
    assert normalize_key("cCorpReturn") == "primary_return"
    assert normalize_key("k401Return") == "retirement_return"
    assert normalize_key("margin_ratio") == "margin_ratio"


def test_apply_overrides_coerces_strings():
    base = Assumptions()

    cfg = apply_overrides(base, {"jamieStartAge": "38", "marginRate": "5.25", "gross_rent": "80,000"})

    assert cfg.jamie_start_age == 38
    assert cfg.margin_rate == 5.25
    assert cfg.gross_rent == 80000.0
    assert base.jamie_start_age == 36


def test_invalid_override_keeps_prior_value(caplog):
    base = Assumptions(margin_ratio=30.0)

    with caplog.at_level(logging.WARNING):
        cfg = apply_overrides(base, {"marginRatio": "lots", "moveOutAge": "34.5", "rentGrowth": ""})

    assert cfg.margin_ratio == 30.0
    assert cfg.move_out_age == 34
    assert cfg.rent_growth == 2.5
    assert "margin_ratio" in caplog.text


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = apply_overrides(Assumptions(), {"favouriteColour": "blue"})

    assert cfg == Assumptions()
    assert "favouriteColour" in caplog.text


def test_no_overrides_returns_same_record():
    base = Assumptions()

    assert apply_overrides(base, None) is base
    assert apply_overrides(base, {}) is base


def test_schema_covers_every_assumption():
    df = AssumptionTableModel().create_default_df()

    assert sorted(df["Field"]) == sorted(assumption_names())
    assert df.loc[df["Field"] == "primary_return", "Value"].item() == 10.0


def test_schema_marks_age_fields():
    model = AssumptionTableModel()
    kinds = {col.field: col.kind for col in model.columns}

    assert kinds["jamie_end_age"] == "age"
    assert kinds["land_appreciation"] == "number"
    assert model.groups()[0] == "Timeline"


def test_edited_table_round_trips_into_assumptions():
    df = AssumptionTableModel().create_default_df()
    df.loc[df["Field"] == "land_appreciation", "Value"] = 6.0

    cfg = apply_overrides(Assumptions(), dataframe_to_overrides(df))

    assert cfg.land_appreciation == 6.0
    assert cfg.current_age == 31

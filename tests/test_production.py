import pytest

from prodband.production import Production, ProductionState, new_production


@pytest.mark.parametrize(
    "state, well, expected",
    [
        (ProductionState.CALM, True, ProductionState.CALM),
        (ProductionState.CALM, False, ProductionState.ANNOYED),
        (ProductionState.ANNOYED, True, ProductionState.CALM),
        (ProductionState.ANNOYED, False, ProductionState.ENRAGED),
        (ProductionState.ENRAGED, False, ProductionState.LEGACY),
        (ProductionState.LEGACY, False, ProductionState.LEGACY),
        (ProductionState.LEGACY, True, ProductionState.ENRAGED),
    ],
)
def test_react(state, well, expected):
    assert state.react(well) is expected


@pytest.mark.parametrize(
    "state, text",
    [
        (ProductionState.CALM, "Calm"),
        (ProductionState.ANNOYED, "Annoyed"),
        (ProductionState.ENRAGED, "Enraged"),
        (ProductionState.LEGACY, "Legacy"),
    ],
)
def test_state_names(state, text):
    assert str(state) == text


def test_new_production_is_calm():
    assert new_production().state is ProductionState.CALM


def test_upset_changes_state_and_reports():
    prod = Production()
    message = prod.upset()
    assert prod.state is ProductionState.ANNOYED
    assert message == "PRODUCTION didn't like this move. PRODUCTION is now 'Annoyed'"


def test_calm_down_changes_state_and_reports():
    prod = Production(ProductionState.ENRAGED)
    message = prod.calm_down()
    assert prod.state is ProductionState.ANNOYED
    assert message.endswith("PRODUCTION is now 'Annoyed'")
    assert message.startswith("PRODUCTION is happy with this move.")


def test_no_impact_keeps_state():
    prod = Production(ProductionState.LEGACY)
    message = prod.no_impact()
    assert prod.state is ProductionState.LEGACY
    assert message == "PRODUCTION is indifferent to this move. PRODUCTION is now 'Legacy'"


def test_repeated_upsets_saturate_at_legacy():
    prod = Production()
    for _ in range(10):
        prod.upset()
    assert prod.state is ProductionState.LEGACY
import pytest


@pytest.mark.parametrize(
    "symbol_name",
    [
        "Dive",
        "DiveMode",
        "DiveStatistics",
        "LengthUnit",
        "StatsConfig",
        "StatsRegistry",
        "install_translations",
        "list_categories",
        "tr",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from dive_stats."""
    module = __import__("dive_stats", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from dive_stats import NotARealClass

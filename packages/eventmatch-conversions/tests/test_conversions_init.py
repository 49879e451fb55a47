"""Tests for eventmatch.conversions public API."""


def test_import_schema_classes():
    """Test that schema classes are importable from top level."""
    from eventmatch.conversions import (
        RECOGNIZED_KEYS,
        ActionSource,
        ConversionEvent,
        UserDataKey,
    )

    assert hasattr(UserDataKey, "EMAIL")
    assert hasattr(ActionSource, "WEBSITE")
    assert hasattr(ConversionEvent, "to_dict")
    assert len(RECOGNIZED_KEYS) == 16


def test_import_operations():
    """Test that the four engine operations are importable from top level."""
    from eventmatch.conversions import (
        calculate_event_match_quality_score,
        get_emq_recommendations,
        prepare_event_for_api,
        validate_event_parameters,
    )

    assert callable(validate_event_parameters)
    assert callable(prepare_event_for_api)
    assert callable(calculate_event_match_quality_score)
    assert callable(get_emq_recommendations)


def test_exception_hierarchy():
    """Test that EventValidationError derives from the package base error."""
    from eventmatch.conversions import ConversionEventError, EventValidationError

    assert issubclass(EventValidationError, ConversionEventError)


def test_all_exports():
    """Test that __all__ contains expected exports."""
    from eventmatch.conversions import __all__

    expected_exports = [
        "ConversionEvent",
        "UserDataKey",
        "ActionSource",
        "validate_event_parameters",
        "prepare_event_for_api",
        "ValidationResult",
        "PreparedEvent",
        "calculate_event_match_quality_score",
        "get_emq_recommendations",
        "assess_match_quality",
        "match_quality_frame",
        "EngineConfig",
        "EventValidationError",
    ]

    for export in expected_exports:
        assert export in __all__, f"{export} not in __all__"

    import eventmatch.conversions as conversions

    for name in __all__:
        assert hasattr(conversions, name), f"{name} missing from module"


def test_package_has_docstring():
    """Test that the package has a docstring."""
    import eventmatch.conversions

    assert eventmatch.conversions.__doc__ is not None
    assert "EventMatch Conversions" in eventmatch.conversions.__doc__

from floodlux.design.spacing import SpacingEstimate, estimate_fixture_spacing

__all__ = ["SpacingEstimate", "estimate_fixture_spacing"]

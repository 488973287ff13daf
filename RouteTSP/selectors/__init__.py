from RouteTSP.selectors.base import BaseSelector
from RouteTSP.selectors.selector_rule_based import RuleBasedSelector, resolve_hint


def get_selector(name: str = "rule_based", **kwargs) -> BaseSelector:
    if name in {"rule_based", "size"}:
        return RuleBasedSelector(**kwargs)
    raise ValueError(f"Unknown selector: {name}")


__all__ = ["BaseSelector", "RuleBasedSelector", "get_selector", "resolve_hint"]

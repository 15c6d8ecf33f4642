from smartlink.rules.loader import load_rules, resolve_rules
from smartlink.rules.models import Rules

__all__ = ["Rules", "load_rules", "resolve_rules"]

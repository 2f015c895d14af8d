from hustler_rules.tui.renderers import ProvisionConsoleUI

__all__ = ["ProvisionConsoleUI"]

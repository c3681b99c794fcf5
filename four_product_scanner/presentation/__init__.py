from .pretty_print import format_grid, pretty_print

__all__ = ["format_grid", "pretty_print"]

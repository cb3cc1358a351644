"""Selection state machine and the dialog-level selector."""

from lunarpick.selector.dialog import LunarDateSelector
from lunarpick.selector.state import Selection, SelectionState

__all__ = ["LunarDateSelector", "Selection", "SelectionState"]

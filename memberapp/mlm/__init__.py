# memberapp/mlm/__init__.py
# ----------------------------------------------------------
# Tree engines: placement, count propagation, downline, audit
# ----------------------------------------------------------

from .placement import Slot, find_slot
from .counts import propagate_counts
from .downline import downline
from .audit import CountMismatch, audit_counts, rebuild_counts, render_tree

"""
Villa Kernel

Read-side core of the villa construction ERP: the stores that the cash-flow
reconciliation and construction-progress derivation read from, the typed
repositories over them, and the shared domain, logging and error plumbing.
"""

__version__ = "0.1.0"

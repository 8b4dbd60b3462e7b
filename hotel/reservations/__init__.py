"""Availability and reservation core: overlap rule, catalog, ledger and the
booking/cancellation operations built on them."""

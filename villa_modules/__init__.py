"""
villa_modules -- read-side ERP modules built on the villa kernel.

``reporting`` reconciles a day's cash flow across the transactional stores
and feeds the dashboards; ``progress`` derives construction stages from
labour-contract milestones.  The two paths share no state.
"""

"""checkmate package.

Badge-scan attendance reconciliation organized by feature modules
(schedules, employees, events, access, reports) with a thin Flask
controller layer over service/repository layers.
"""

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Teams API: group-scoped rosters, events and legacy data import."""

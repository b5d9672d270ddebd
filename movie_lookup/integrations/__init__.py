"""
External system integrations (TMDb, Wikipedia).

New external metadata clients should live under this namespace so they remain
decoupled from app entrypoints (`api/`) and command line scripts (`scripts/`).
"""

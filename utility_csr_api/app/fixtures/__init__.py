"""
Static fixture data for the three fake utilities.

Rows are kept in each utility's native column names; the tenant
adapters in ``services.tenants`` normalize them.  Everything here is
made up.
"""

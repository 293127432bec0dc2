"""Core domain: catalog, snapshot, configuration, protocols and errors."""

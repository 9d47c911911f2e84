"""numpy/scipy helpers for working with frozen DFAs in bulk."""

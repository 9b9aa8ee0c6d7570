"""Native interface bindings of libmagic."""

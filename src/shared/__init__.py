"""Cross-cutting pieces shared by the catalogue and ordering contexts."""

"""Dataset loading and categorical encodings."""

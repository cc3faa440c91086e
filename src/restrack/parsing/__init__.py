"""Command-line text parsing: prefixes, tokenizer, and per-verb parsers."""

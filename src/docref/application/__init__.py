"""Workflows that drive the reference engines over a set of documents."""

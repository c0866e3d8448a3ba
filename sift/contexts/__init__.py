"""Bounded contexts of the SIFT analysis pipeline."""

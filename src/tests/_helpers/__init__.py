"""Shared test helpers for the bindable_assertions suite."""

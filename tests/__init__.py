"""pygaschem tests."""

"""Core: the batch attribute-mutation engine and the chattr command loop."""

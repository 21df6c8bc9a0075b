"""Infrastructure: platform attribute providers and filesystem checks."""

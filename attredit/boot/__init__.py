"""Boot layer: wires infrastructure, configuration and UI together."""

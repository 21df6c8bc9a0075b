"""Application layer: ports that decouple the engine from Qt and the OS."""

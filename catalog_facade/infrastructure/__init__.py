"""Infrastructure layer - configuration, logging and the remote catalog client."""

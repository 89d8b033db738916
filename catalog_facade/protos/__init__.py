"""Generated protobuf and gRPC modules for the remote catalog contract."""

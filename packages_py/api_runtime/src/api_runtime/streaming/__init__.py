from .sse import SSEStream, sse

__all__ = ["SSEStream", "sse"]

from chainrelay.proxy import Relay

__all__ = ["Relay"]

from loadgrid.events.signal import Signal

__all__ = ["Signal"]

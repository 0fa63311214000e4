"""In-memory PDN gateway model: control-plane state and data-plane forwarding."""

__version__ = "0.1.0"
__all__ = ["control_plane", "data_plane", "pdn_connection"]
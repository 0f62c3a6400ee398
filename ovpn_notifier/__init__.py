"""OpenVPN client notifier: watches the management interface, pushes connect/disconnect alerts."""

__version__ = "0.1.0"

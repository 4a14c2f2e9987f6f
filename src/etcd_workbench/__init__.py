"""etcd-workbench server: HTTP front-end for the etcd management UI."""

__version__ = "1.1.0"

"""Allow `python -m etcd_workbench.cli`."""

from .main import main

main()

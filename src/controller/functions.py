"""Lookups of functions that consume a package."""
from __future__ import annotations

from typing import List

from archive.models import FunctionRef
from controller.client import ControllerClient


def get_functions_by_package(client: ControllerClient, pkg_name: str, pkg_namespace: str) -> List[FunctionRef]:
    """Return functions in ``pkg_namespace`` whose package reference is ``pkg_name``."""
    fns = [FunctionRef.from_api(obj) for obj in client.function_list(pkg_namespace)]
    return [fn for fn in fns if fn.package_name == pkg_name]

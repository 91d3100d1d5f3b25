"""
Interface for the component that owns a ProtocolOptions instance.

The cluster lifecycle code creates connections and binds the options to
itself at startup. The options only keep the handle, so the interface
has no required members.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClusterManager(Protocol):
    """
    Handle to the owner of cluster connections.

    Any object satisfies this protocol. It exists to document the
    association and to type the back-reference.
    """

"""Fixed-shape domain modules layered over the transport."""

from base44_sdk.modules.auth import AuthModule
from base44_sdk.modules.entities import EntitiesModule, EntityHandler

__all__ = ["AuthModule", "EntitiesModule", "EntityHandler"]

from .pyee_adapter import PyeeEmitter

__all__: list[str] = ["PyeeEmitter"]

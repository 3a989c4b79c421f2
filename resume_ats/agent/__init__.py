from .manager import AgentManager

__all__ = ["AgentManager"]

"""Scene, camera, collision, project-file and player-server core of a small shooter engine."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "collider",
    "collision",
    "gameobject",
    "geometry",
    "mesh",
    "model",
    "network_server",
    "project_load",
    "project_save",
    "raycast",
    "rigid_body",
    "shader",
]
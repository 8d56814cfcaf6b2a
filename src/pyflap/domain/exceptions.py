class ActorCollided(Exception):
    """Raised by the domain when the actor leaves the playfield or hits a solid band."""

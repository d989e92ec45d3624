"""Services that talk to the outside world: terminal input and audio."""

"""Allow ``python -m eksphemeral``."""

from eksphemeral.main import app

if __name__ == "__main__":
    app()

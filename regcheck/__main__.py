from regcheck.cli import app

app()

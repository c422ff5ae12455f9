from rivals_api.cli.main import app

app()

from realiser_service.cli import app

app()

from circles import create_app

app = create_app()

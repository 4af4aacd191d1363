from . import create_app

app = create_app()

if __name__ == "__main__":
    app.logger.info("Backend running at http://localhost:%s", app.config["PORT"])
    app.run(port=app.config["PORT"])

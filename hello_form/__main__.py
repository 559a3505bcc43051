from hello_form.app import create_app
from hello_form.log_config import configure_logging

app = create_app()

if __name__ == "__main__":
    configure_logging(verbose=app.config["LOG_VERBOSE"], log_json=app.config["LOG_JSON"])
    # Bind to 0.0.0.0:8080 by default, no debug mode.
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=False)

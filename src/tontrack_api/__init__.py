from flask import Flask
from flask_smorest import Api

from tontrack_monitor.Controller import Controller

from tontrack_api.routes import register_routes


def create_app(controller: Controller) -> Flask:
    app = Flask(__name__)
    app.config['CONTROLLER'] = controller

    # Flask-smorest OpenAPI config
    app.config['API_TITLE'] = 'tontrack API'
    app.config['API_VERSION'] = 'v1'
    app.config['OPENAPI_VERSION'] = '3.0.2'
    app.config['OPENAPI_URL_PREFIX'] = '/'
    app.config['OPENAPI_SWAGGER_UI_PATH'] = '/swagger'
    app.config['OPENAPI_SWAGGER_UI_URL'] = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist/'

    api = Api(app)
    register_routes(api)

    return app


__all__ = [
  "create_app",
]

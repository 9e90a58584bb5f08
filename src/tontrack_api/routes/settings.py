from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import Schema, fields
from typing import Dict, Any

from tontrack_api.helper import abort_on_error, get_controller


class LogDirSchema(Schema):
    # Empty or null falls back to the platform default directory
    log_dir = fields.Str(required=True, allow_none=True)


class EnabledSchema(Schema):
    enabled = fields.Bool(required=True)


blueprint = Blueprint('settings', 'settings', url_prefix='/settings', description='Monitor settings')


@blueprint.route('/log-dir')
class LogDir(MethodView):
    @blueprint.arguments(LogDirSchema, location="json")
    @blueprint.response(200, description="Set the VRChat log directory")
    def post(self, args: Dict[str, Any]) -> Dict[str, Any]:
        with abort_on_error():
            return get_controller().set_log_dir(args['log_dir'])


@blueprint.route('/auto-switch-tab')
class AutoSwitchTab(MethodView):
    @blueprint.arguments(EnabledSchema, location="json")
    @blueprint.response(200, description="Publish round start/end events")
    def post(self, args: Dict[str, Any]) -> Dict[str, Any]:
        with abort_on_error():
            return get_controller().set_auto_switch_tab(bool(args['enabled']))

from flask.views import MethodView
from flask_smorest import Blueprint
from marshmallow import Schema, fields
from typing import Dict, Any

from tontrack_api.helper import abort_on_error, get_controller


class OverlayEnabledSchema(Schema):
    enabled = fields.Bool(required=True)


class OverlayPositionSchema(Schema):
    # Unknown names fall back to RightHand
    position = fields.Str(required=True)


blueprint = Blueprint('overlay', 'overlay', url_prefix='/overlay', description='VR overlay control')


@blueprint.route('/enabled')
class Enabled(MethodView):
    @blueprint.arguments(OverlayEnabledSchema, location="json")
    @blueprint.response(200, description="Start or stop the VR overlay")
    def post(self, args: Dict[str, Any]) -> Dict[str, Any]:
        with abort_on_error():
            return get_controller().set_vr_overlay_enabled(bool(args['enabled']))


@blueprint.route('/position')
class Position(MethodView):
    @blueprint.arguments(OverlayPositionSchema, location="json")
    @blueprint.response(200, description="Move the VR overlay")
    def post(self, args: Dict[str, Any]) -> Dict[str, Any]:
        with abort_on_error():
            return get_controller().set_vr_overlay_position(str(args['position']))

"""
HTTP API for diff cases.

Endpoints:
    POST /v1/diff/<name>/left    submit base64 data for the left side
    POST /v1/diff/<name>/right   submit base64 data for the right side
    GET  /v1/diff/<name>         latest report of a case

Submissions answer 204 on success and 400 when the data is missing or not
valid base64. Report lookups answer 404 for unknown cases. Storage errors
are logged and answered with 500; nothing is retried here.
"""

import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from bytediff.application.case_coordinator import CaseCoordinator
from bytediff.domain.exceptions import InvalidPayloadError
from bytediff.interface.api.resources import BinaryDataResource, DiffReportResource

logger = logging.getLogger(__name__)


def create_app(coordinator: CaseCoordinator, max_request_bytes: int | None = None) -> Flask:
    """
    Build the Flask application around a coordinator.

    Args:
        coordinator: Service handling submissions and lookups
        max_request_bytes: Largest accepted request body (None = unlimited)
    """
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = max_request_bytes

    @app.route('/v1/diff/<name>/<any(left, right):side>', methods=['POST'])
    def submit_side(name, side):
        """Attach binary data to one side of a diff case."""
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({'error': 'request body must be a JSON object'}), 400

        try:
            resource = BinaryDataResource.model_validate(body)
        except ValidationError:
            return jsonify({'error': 'invalid base64 data'}), 400

        try:
            coordinator.submit_encoded_side(name, side, resource.data)
        except InvalidPayloadError as e:
            return jsonify({'error': str(e)}), 400

        return '', 204

    @app.route('/v1/diff/<name>', methods=['GET'])
    def get_report(name):
        """Return the latest diff report of a case."""
        report = coordinator.get_report(name)
        if report is None:
            return jsonify({'error': 'diff case not found'}), 404
        return jsonify(DiffReportResource.from_report(report).to_json())

    @app.errorhandler(RequestEntityTooLarge)
    def payload_too_large(_error):
        return jsonify({'error': 'payload too large'}), 413

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def unexpected_error(error):
        logger.exception("Request %s %s failed: %s", request.method, request.path, error)
        return jsonify({'error': 'internal storage error'}), 500

    return app

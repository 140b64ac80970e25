"""
Flask routes for the Gyazo Search GUI.

Contains all API endpoints for the web interface. The page sends
keystrokes to /api/input and polls /api/status; the server owns the
debounce timer and the result list.
"""

from __future__ import annotations

import logging
from datetime import datetime

from flask import Blueprint, current_app, jsonify, render_template, request

from ..config import GRID_SIZES
from ..detail import detail_dict, grid_subtitle
from ..models import Notice
from ..search import SearchSession
from ..user_config import get_user_config
from ..utils import validators

# Create blueprint for routes
api = Blueprint('api', __name__)

# Module logger
_logger = logging.getLogger(__name__)


def _session() -> SearchSession:
    return current_app.config['SEARCH_SESSION']


# =============================================================================
# Route Handlers
# =============================================================================

@api.route('/')
def index():
    """Serve the main HTML page."""
    return render_template(
        'index.html',
        grid_sizes=GRID_SIZES,
        default_columns=current_app.config.get('GRID_COLUMNS', 5),
    )


@api.route('/api/ping')
def api_ping():
    """Simple endpoint for connection monitoring."""
    return jsonify({'status': 'ok', 'time': datetime.now().isoformat()})


@api.route('/api/status')
def api_status():
    """Return current search status."""
    return jsonify(_session().to_status_dict())


@api.route('/api/images')
def api_images():
    """Return all loaded images for the grid."""
    session = _session()
    state = session.snapshot()
    payload = session.to_images_dict(state)
    for item, image in zip(payload['images'], state.results):
        item['subtitle'] = grid_subtitle(image)
    return jsonify(payload)


@api.route('/api/images/<image_id>')
def api_image_detail(image_id: str):
    """Return the detail view of a loaded image."""
    image = _session().get_image(image_id)
    if image is None:
        return jsonify({'error': 'Image not loaded'}), 404
    return jsonify(detail_dict(image))


@api.route('/api/input', methods=['POST'])
def api_input():
    """Record search box contents; the query commits after the debounce window."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body required'}), 400

    text = data.get('text', '')
    is_valid, error = validators.validate_text(text, 'text')
    if not is_valid:
        return jsonify({'error': error}), 400

    _session().input_changed(text)
    return jsonify({'status': 'pending'})


@api.route('/api/search', methods=['POST'])
def api_search():
    """Commit a query immediately, bypassing the debounce window."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body required'}), 400

    query = data.get('query', '')
    is_valid, error = validators.validate_text(query, 'query')
    if not is_valid:
        return jsonify({'error': error}), 400

    session = _session()
    session.input_changed(query)
    session.flush_input()
    return jsonify(session.to_status_dict())


@api.route('/api/load_more', methods=['POST'])
def api_load_more():
    """Append the next page of the committed query."""
    session = _session()
    if not session.load_more():
        return jsonify({'status': 'busy'}), 409
    status = session.to_status_dict()
    status['status'] = 'loaded'
    return jsonify(status)


@api.route('/api/notifications')
def api_notifications():
    """Return and clear queued notices."""
    notices = _session().drain_notices()
    return jsonify({'notifications': [n.to_dict() for n in notices]})


@api.route('/api/copied', methods=['POST'])
def api_copied():
    """Record a clipboard copy made by the page so it shows a toast."""
    data = request.get_json(silent=True) or {}
    what = data.get('what', 'Permalink')
    if what not in ('Permalink', 'Image URL'):
        return jsonify({'error': "'what' must be 'Permalink' or 'Image URL'"}), 400
    _session().notify(Notice.copied(what))
    return jsonify({'status': 'ok'})


@api.route('/api/settings', methods=['GET'])
def api_settings():
    """Report whether an access token is configured."""
    config = get_user_config()
    session = _session()
    return jsonify({
        'has_token': session.client.has_access_token,
        'masked_token': config.masked_token(),
        'config_file': str(config.config_file_path),
    })


@api.route('/api/settings', methods=['POST'])
def api_settings_save():
    """Save a new access token and reload the current query."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body required'}), 400

    token = data.get('access_token', '')
    if not isinstance(token, str) or not token.strip():
        return jsonify({'error': 'Access token required'}), 400

    if current_app.config.get('PERSIST_SETTINGS', True):
        if not get_user_config().set_access_token(token):
            return jsonify({'error': 'Could not write configuration file'}), 500

    session = _session()
    session.set_access_token(token)
    _logger.info("Access token updated; reloading results")
    session.load_initial(session.snapshot().committed_query)
    return jsonify(session.to_status_dict())

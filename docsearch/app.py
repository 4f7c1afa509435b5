"""
Flask web application for the search engine frontend.

The loaded index is not a module global: create_app() receives a Searcher
and every request handler reads it from app.config.
"""

import time
from flask import Flask, request, jsonify, send_from_directory

from docsearch.paths import FRONTEND_DIR, DEFAULT_TOPK
from docsearch.searcher import Searcher


def create_app(searcher: Searcher, frontend_dir: str = FRONTEND_DIR) -> Flask:
    app = Flask(__name__)
    app.config["SEARCHER"] = searcher
    app.config["FRONTEND_DIR"] = frontend_dir

    @app.before_request
    def log_request():
        print(f"[App] received request! method: {request.method}, url: {request.path}")

    @app.route('/')
    @app.route('/index.html')
    def index():
        """Serve the main search page."""
        return send_from_directory(app.config["FRONTEND_DIR"], 'index.html',
                                   mimetype='text/html')

    @app.route('/index.js')
    def index_js():
        return send_from_directory(app.config["FRONTEND_DIR"], 'index.js',
                                   mimetype='text/javascript')

    @app.route('/api/search', methods=['POST'])
    def search():
        """
        Handle search requests.

        Body is either the raw query text, or JSON {"query": str, "topk": int}.
        """
        topk = DEFAULT_TOPK
        if request.is_json:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({'error': 'Body must be a JSON object'}), 400
            query = data.get('query', '')
            topk = data.get('topk', DEFAULT_TOPK)
            if not isinstance(query, str):
                return jsonify({'error': 'query must be a string'}), 400
            if topk is not None and (isinstance(topk, bool) or not isinstance(topk, int) or topk < 1):
                return jsonify({'error': 'topk must be a positive integer'}), 400
        else:
            try:
                query = request.get_data().decode('utf-8')
            except UnicodeDecodeError as e:
                print(f"[App] ERROR: could not interpret body as UTF-8 string: {e}")
                return jsonify({'error': 'Body is not valid UTF-8'}), 400

        start_time = time.perf_counter()
        results = app.config["SEARCHER"].search(query, topk=topk)
        search_time = (time.perf_counter() - start_time) * 1000  # ms

        for docid, score in results:
            print(f"[App] {docid} => {score}")

        return jsonify({
            'results': [{'docid': docid, 'score': score} for docid, score in results],
            'searchTime': search_time,
            'totalResults': len(results),
            'query': query,
        })

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'documents': len(app.config["SEARCHER"].index),
        })

    return app

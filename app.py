# app.py
import argparse
import logging

from flask import Flask, request, jsonify

from insight_seo import GrammarChecker, SEOEngine
from insight_seo.config import Settings, load_config
from insight_seo.errors import GrammarServiceUnavailableError
from insight_seo.logging_config import setup_logging
from insight_seo.payloads import AnalysisRequest, GrammarRequest, InsertionRequest

logger = logging.getLogger("insight_seo.app")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def _allowed_origin(cors_origins, origin):
    if cors_origins == "*" or cors_origins is None:
        return "*"
    if isinstance(cors_origins, str):
        cors_origins = [o.strip() for o in cors_origins.split(",")]
    return origin if origin in cors_origins else None


def create_app(config=None, engine=None, grammar_checker=None) -> Flask:
    """
    Builds the Flask application.

    `config` is a nested config dict (see insight_seo.config.DEFAULT_CONFIG); the
    engine and grammar checker are built from it once and shared by all requests.
    """
    app_config = config if config else load_config()
    settings = Settings.from_config(app_config)
    engine = engine if engine else SEOEngine(settings)
    grammar_checker = grammar_checker if grammar_checker else GrammarChecker(settings)
    cors_origins = app_config.get("Global", {}).get("cors_origins", "*")

    app = Flask(__name__)

    @app.after_request
    def add_cors_headers(response):
        origin = _allowed_origin(cors_origins, request.headers.get("Origin"))
        if origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type"
            if origin != "*":
                response.headers.add("Vary", "Origin")
        return response

    @app.route('/health', methods=['GET'])
    def health_endpoint():
        return jsonify({"status": "ok"})

    @app.route('/analyze', methods=['POST'])
    def analyze_endpoint():
        try:
            payload = AnalysisRequest.from_payload(request.get_json(silent=True))
            return jsonify(engine.analyze(payload.text))
        except ValueError as ve:
            return jsonify({"error": str(ve)}), 400
        except Exception:
            logger.exception("Unexpected error in /analyze")
            return jsonify({"error": "An unexpected error occurred"}), 500

    @app.route('/insert-keyword', methods=['POST'])
    def insert_keyword_endpoint():
        try:
            payload = InsertionRequest.from_payload(request.get_json(silent=True))
            return jsonify(engine.insert_keyword(payload.text, payload.keyword))
        except ValueError as ve:
            return jsonify({"error": str(ve)}), 400
        except Exception:
            logger.exception("Unexpected error in /insert-keyword")
            return jsonify({"error": "An unexpected error occurred"}), 500

    @app.route('/api/nlp/check-grammar', methods=['POST'])
    def check_grammar_endpoint():
        try:
            payload = GrammarRequest.from_payload(request.get_json(silent=True))
            return jsonify(grammar_checker.check(payload.text, language=payload.language))
        except ValueError as ve:
            return jsonify({"error": str(ve)}), 400
        except GrammarServiceUnavailableError:
            return jsonify({"error": "Grammar check failed"}), 502
        except Exception:
            logger.exception("Unexpected error in /api/nlp/check-grammar")
            return jsonify({"error": "An unexpected error occurred"}), 500

    return app


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="InsightSEO text analysis server")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--host", type=str, default=DEFAULT_HOST, help="Interface to bind the server to.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and the Flask debugger.")
    args = parser.parse_args(argv)

    current_config = load_config(args.config)
    global_cfg = current_config.get("Global", {})
    setup_logging(
        level="DEBUG" if args.debug else global_cfg.get("log_level", "INFO"),
        log_dir=global_cfg.get("log_dir", "logs"),
    )

    app = create_app(current_config)
    logger.info("Starting Flask server on http://%s:%s/", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    run_cli()

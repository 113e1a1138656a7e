"""
Anúncio por Perfil - backend
Proxy mínimo para o front-end de anúncios personalizados.
- Categoria: LLM escolhe a categoria de anúncio para gênero/idade/local
- Anúncio: LLM gera um slogan curto para a categoria
- Localização: cidade/país aproximados a partir do IP do visitante
"""

import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

import settings
import ads
import geolocation
from errors import ValidationError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Front-end estático (public/) servido na raiz
app = Flask(__name__, static_folder=settings.STATIC_DIR, static_url_path="")

# =============================================================================
# CONFIGURAÇÃO PARA PROXY REVERSO
# =============================================================================
# ProxyFix ajusta request.remote_addr confiando em TRUSTED_PROXY_HOPS proxies.
# O header X-Forwarded-For bruto continua disponível para resolve_client_ip.
if settings.TRUSTED_PROXY_HOPS > 0:
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=settings.TRUSTED_PROXY_HOPS)

CORS(app, origins=settings.ALLOWED_ORIGINS)

INTERNAL_ERROR = {"error": "Internal server error"}
LOCATION_ERROR = {"city": "Error", "country": "Failed to fetch"}


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.route("/api/get-category", methods=["POST"])
def get_category():
    """Escolhe a categoria de anúncio mais relevante para o perfil."""

    try:
        profile, _ = ads.parse_profile(request.get_json(silent=True))
        category = ads.select_category(profile)
        return jsonify({"category": category})

    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Failed to select category")
        return jsonify(INTERNAL_ERROR), 500


@app.route("/api/get-ad", methods=["POST"])
def get_ad():
    """Gera o slogan do anúncio para perfil + categoria."""

    try:
        profile, category = ads.parse_profile(request.get_json(silent=True), require_category=True)
        ad = ads.generate_ad(profile, category)
        return jsonify({"ad": ad})

    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Failed to generate ad slogan")
        return jsonify(INTERNAL_ERROR), 500


@app.route("/api/location", methods=["GET"])
def get_location():
    """Cidade/país aproximados do visitante (melhor esforço)."""

    try:
        forwarded_for = request.headers.get("X-Forwarded-For")
        logger.info("X-Forwarded-For header: %s", forwarded_for)

        ip = geolocation.resolve_client_ip(
            forwarded_for, request.remote_addr, settings.TRUSTED_PROXY_HOPS
        )
        logger.info("Resolved client IP: %s", ip)

        return jsonify(geolocation.locate(ip))

    except Exception:
        logger.exception("Failed to get location")
        return jsonify(LOCATION_ERROR), 500


# =============================================================================
# ROTAS GERAIS
# =============================================================================

@app.route("/health", methods=["GET"])
def health_check():
    """Endpoint de health check."""
    return jsonify({
        "status": "healthy",
        "service": "Anuncio por Perfil",
        "version": "1.0.0",
    })


@app.route("/")
def serve_frontend():
    """Serve o index.html do front-end na rota raiz."""
    return app.send_static_file("index.html")


if __name__ == "__main__":
    print("\n" + "="*60)
    print("Anúncio por Perfil")
    print("="*60)
    print(f"Servidor: http://localhost:{settings.PORT}")
    print("Endpoints:")
    print("   POST /api/get-category - Categoria de anúncio (LLM)")
    print("   POST /api/get-ad       - Slogan do anúncio (LLM)")
    print("   GET  /api/location     - Localização por IP")
    print("   GET  /health           - Health check")
    print("="*60 + "\n")

    app.run(host="0.0.0.0", port=settings.PORT)

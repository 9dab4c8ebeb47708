"""Tests for the /css/ and /img/ static directories."""

from counseling_site.routes.counseling_routes import CSS_DIR, IMG_DIR


class TestStaticFiles:
    def test_css_served_byte_for_byte(self, counseling_client) -> None:
        response = counseling_client.get('/css/print.css')
        assert response.status_code == 200
        assert response.mimetype == 'text/css'
        assert response.data == (CSS_DIR / 'print.css').read_bytes()
        response.close()

    def test_image_served_byte_for_byte(self, counseling_client) -> None:
        response = counseling_client.get('/img/logo.svg')
        assert response.status_code == 200
        assert response.mimetype == 'image/svg+xml'
        assert response.data == (IMG_DIR / 'logo.svg').read_bytes()
        response.close()

    def test_missing_css_is_404(self, counseling_client) -> None:
        assert counseling_client.get('/css/missing.css').status_code == 404

    def test_missing_image_is_404(self, counseling_client) -> None:
        assert counseling_client.get('/img/becky_portrait.jpeg').status_code == 404

    def test_path_traversal_is_404(self, counseling_client) -> None:
        assert counseling_client.get('/css/../../config.py').status_code == 404

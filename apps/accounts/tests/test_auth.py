import pytest
from django.contrib.auth import get_user_model


pytestmark = pytest.mark.django_db

User = get_user_model()

PASSWORD = 'road-trip-2024'


class TestSignup:
    def test_creates_user_with_hashed_password_and_logs_in(self, client):
        response = client.post('/signup', {
            'name': 'Carla Mendes',
            'email': 'Carla@Example.com',
            'password': 'open-road-99',
        })
        assert response.status_code == 302
        assert response.url == '/locations'

        user = User.objects.get(email='carla@example.com')
        assert user.first_name == 'Carla Mendes'
        assert user.password != 'open-road-99'
        assert user.check_password('open-road-99')
        assert client.session['_auth_user_id'] == str(user.pk)

    def test_duplicate_email_rerenders_with_message(self, client, user):
        response = client.post('/signup', {
            'name': 'Someone Else',
            'email': 'ANA@example.com',
            'password': 'another-road-42',
        })
        assert response.status_code == 200
        assert b'Email already in use' in response.content
        assert User.objects.filter(email__iexact='ana@example.com').count() == 1
        assert '_auth_user_id' not in client.session

    @pytest.mark.parametrize('password', ['x', '12345678901', 'password123'])
    def test_weak_password_is_rejected(self, client, password):
        response = client.post('/signup', {
            'name': 'Carla Mendes',
            'email': 'carla@example.com',
            'password': password,
        })
        assert response.status_code == 200
        assert response.context['form'].errors['password']
        assert not User.objects.filter(email='carla@example.com').exists()
        assert '_auth_user_id' not in client.session

    def test_logged_in_user_is_sent_to_booking(self, auth_client):
        response = auth_client.get('/signup')
        assert response.url == '/locations'


class TestLogin:
    def test_valid_credentials(self, client, user):
        response = client.post('/login', {'email': 'ana@example.com', 'password': PASSWORD})
        assert response.url == '/locations'
        assert client.session['_auth_user_id'] == str(user.pk)

    def test_honours_local_next(self, client, user):
        response = client.post('/login?next=/reservations', {
            'email': 'ana@example.com', 'password': PASSWORD,
        })
        assert response.url == '/reservations'

    def test_ignores_offsite_next(self, client, user):
        response = client.post('/login', {
            'email': 'ana@example.com', 'password': PASSWORD, 'next': 'https://evil.example.com/',
        })
        assert response.url == '/locations'

    @pytest.mark.parametrize('email, password', [
        ('ana@example.com', 'wrong-password'),
        ('nobody@example.com', PASSWORD),
    ])
    def test_invalid_credentials(self, client, user, email, password):
        response = client.post('/login', {'email': email, 'password': password})
        assert response.status_code == 200
        assert b'Invalid email or password' in response.content
        assert '_auth_user_id' not in client.session

    def test_failed_login_keeps_posted_next(self, client, user):
        response = client.post('/login', {
            'email': 'ana@example.com', 'password': 'wrong-password', 'next': '/reservations',
        })
        assert response.status_code == 200
        assert response.context['next'] == '/reservations'
        assert b'value="/reservations"' in response.content


class TestLogout:
    def test_destroys_identity_and_draft(self, auth_client, set_draft, location):
        set_draft({'location_id': str(location.id), 'start_date': '2024-01-01', 'end_date': '2024-01-02'})
        response = auth_client.get('/logout')
        assert response.url == '/login'
        assert '_auth_user_id' not in auth_client.session
        assert 'booking' not in auth_client.session

        response = auth_client.get('/locations')
        assert response.url.startswith('/login')

    def test_is_unconditional(self, client):
        response = client.get('/logout')
        assert response.url == '/login'


def test_home_redirects_by_login_state(client, auth_client):
    assert auth_client.get('/').url == '/locations'
    auth_client.logout()
    assert client.get('/').url == '/login'

from datetime import date

from bookproject_app.models import ReadingGoal
from bookproject_app.modules.goals.services import GoalService


def test_goal_page_requires_login(client):
    response = client.get('/goal')
    assert response.status_code == 401


def test_goal_page_without_goal(logged_in_client, fixed_today):
    response = logged_in_client.get('/goal')

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'Reading goal not set' in body
    assert 'Set goal' in body


def test_goal_page_shows_progress(logged_in_client, reader, add_book, fixed_today):
    GoalService.save_goal(reader.user_id, 'BOOKS', 52, 2024)
    for index in range(8):
        add_book(reader, f'Book {index}', finished=date(2024, 2, 1 + index), pages=200)
    add_book(reader, 'Old Book', finished=date(2023, 5, 1), pages=200)

    response = logged_in_client.get('/goal')

    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert 'You have read 8 out of 52 books' in body
    assert '15.38% completed' in body
    assert 'You are 3 books behind schedule' in body
    assert 'You need to read 2 books a week on average to achieve your goal' in body
    assert 'Update goal' in body


def test_save_goal_redirects_and_persists(logged_in_client, reader, fixed_today):
    response = logged_in_client.post('/goal', data={'goal_type': 'PAGES', 'target': '1200'})

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/goal')

    goal = ReadingGoal.query.filter_by(user_id=reader.user_id, year=2024).one()
    assert goal.goal_type == 'PAGES'
    assert goal.target == 1200

    page = logged_in_client.get('/goal').get_data(as_text=True)
    assert 'You have read 0 out of 1200 pages' in page


def test_save_goal_rejects_invalid_target(logged_in_client, reader, fixed_today):
    response = logged_in_client.post('/goal', data={'goal_type': 'BOOKS', 'target': '0'})

    assert response.status_code == 400
    assert ReadingGoal.query.filter_by(user_id=reader.user_id).count() == 0


def test_save_goal_rejects_unknown_type(logged_in_client, reader, fixed_today):
    response = logged_in_client.post('/goal', data={'goal_type': 'CHAPTERS', 'target': '5'})

    assert response.status_code == 400
    assert ReadingGoal.query.filter_by(user_id=reader.user_id).count() == 0


def test_reset_goal(logged_in_client, reader, fixed_today):
    GoalService.save_goal(reader.user_id, 'BOOKS', 10, 2024)

    response = logged_in_client.post('/goal/reset')

    assert response.status_code == 302
    assert GoalService.find_current_goal(reader.user_id, 2024) is None


def test_progress_api_without_goal(logged_in_client, fixed_today):
    payload = logged_in_client.get('/api/goal/progress').get_json()

    assert payload['success'] is True
    assert payload['data'] is None


def test_progress_api_with_goal(logged_in_client, reader, add_book, fixed_today):
    GoalService.save_goal(reader.user_id, 'BOOKS', 10, 2024)
    for index in range(10):
        add_book(reader, f'Book {index}', finished=date(2024, 1, 10 + index))

    payload = logged_in_client.get('/api/goal/progress').get_json()

    data = payload['data']
    assert data['schedule_direction'] == 'MET'
    assert data['fraction'] == 1.0
    assert data['current_week'] == 11
    assert data['display']['schedule_text'] == 'Congratulations for reaching your target!'


def test_unknown_api_endpoint_returns_json(logged_in_client):
    response = logged_in_client.get('/api/goal/unknown')

    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'


def test_goals_blueprint_is_registered(app):
    assert 'goals' in app.blueprints
    endpoints = {(rule.rule, rule.endpoint) for rule in app.url_map.iter_rules()}
    assert ('/goal', 'goals.goal_view') in endpoints
    assert ('/goal', 'goals.save_goal') in endpoints
    assert ('/api/goal/progress', 'goals.goal_progress_api') in endpoints

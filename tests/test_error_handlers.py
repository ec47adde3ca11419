from bookproject_app.core.error_handlers import (
    BookProjectError,
    ValidationError,
    error_response,
    success_response,
)


def test_validation_error_payload():
    error = ValidationError('Progress inputs must be non-negative', errors={'target': [-1]})

    assert error.status_code == 400
    assert error.to_dict() == {
        'success': False,
        'message': 'Progress inputs must be non-negative',
        'code': 'VALIDATION_ERROR',
        'details': {'errors': {'target': [-1]}},
    }


def test_validation_error_is_a_bookproject_error():
    error = ValidationError()

    assert isinstance(error, BookProjectError)
    assert error.code == 'VALIDATION_ERROR'
    assert error.details == {}


def test_response_envelopes(app):
    with app.test_request_context():
        response, status = error_response('Nope', 'BAD', 418)
        assert status == 418
        assert response.get_json() == {'success': False, 'message': 'Nope', 'code': 'BAD'}

    assert success_response({'a': 1}) == {'success': True, 'data': {'a': 1}}
    assert success_response(None, message='empty') == {'success': True, 'data': None, 'message': 'empty'}


def test_raised_error_is_rendered_as_json(app):
    @app.route('/api/boom')
    def boom():
        raise ValidationError('bad input')

    response = app.test_client().get('/api/boom')

    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_raised_error_on_page_flashes_and_redirects(app):
    @app.route('/boom')
    def page_boom():
        raise ValidationError('Target must be a positive number')

    client = app.test_client()
    response = client.get('/boom')

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/goal')
    with client.session_transaction() as sess:
        assert ('error', 'Target must be a positive number') in sess['_flashes']

"""
Video and question management tests, public content reads and recommendations
"""
from unittest import mock

import requests
from rest_framework.test import APIClient, APITestCase

from admin.testing import make_admin, make_profile, sign_in
from catalog.models import Video, Question
from catalog.services import youtube


def oembed_response(status_code=200, payload=None):
    resp = mock.Mock(status_code=status_code)
    resp.json.return_value = payload or {}
    return resp


class YouTubeHelperTests(APITestCase):

    def test_extracts_id_from_supported_links(self):
        self.assertEqual(youtube.extract_youtube_id('https://youtube.com/watch?v=abc123'), 'abc123')
        self.assertEqual(youtube.extract_youtube_id('https://www.youtube.com/watch?v=abc123&t=42'), 'abc123')
        self.assertEqual(youtube.extract_youtube_id('https://youtu.be/abc123'), 'abc123')
        self.assertEqual(youtube.extract_youtube_id('https://www.youtube.com/embed/abc123'), 'abc123')
        self.assertEqual(youtube.extract_youtube_id('https://youtube.com/shorts/abc123'), 'abc123')

    def test_rejects_other_links(self):
        self.assertIsNone(youtube.extract_youtube_id('https://vimeo.com/12345'))
        self.assertIsNone(youtube.extract_youtube_id(''))
        with self.assertRaises(youtube.InvalidYouTubeUrl):
            youtube.require_youtube_id('not a url')

    @mock.patch('catalog.services.youtube.requests.get', side_effect=requests.ConnectionError('offline'))
    def test_metadata_falls_back_when_lookup_fails(self, _get):
        metadata = youtube.fetch_video_metadata('abc123')
        self.assertEqual(metadata['title'], 'YouTube Video')
        self.assertEqual(metadata['thumbnail'], 'https://img.youtube.com/vi/abc123/maxresdefault.jpg')

    @mock.patch('catalog.services.youtube.requests.get', return_value=oembed_response(404))
    def test_metadata_falls_back_on_http_error(self, _get):
        self.assertEqual(youtube.fetch_video_metadata('abc123')['title'], 'YouTube Video')


class AdminVideoTests(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_profile('student@test.com')
        sign_in(self.client, self.admin)

    def _create(self, url='https://youtube.com/watch?v=abc123', **extra):
        data = {'youtube_url': url, 'class_level': '11', 'subject': 'PHYSICS', 'chapter': 'Optics'}
        data.update(extra)
        return self.client.post('/api/admin/videos/', data)

    @mock.patch('catalog.services.youtube.requests.get')
    def test_create_video_from_youtube_url(self, get):
        get.return_value = oembed_response(200, {'title': 'Refraction explained'})
        response = self._create()
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['youtube_id'], 'abc123')
        self.assertEqual(response.data['title'], 'Refraction explained')
        self.assertEqual(response.data['thumbnail'], 'https://img.youtube.com/vi/abc123/maxresdefault.jpg')
        self.assertEqual(response.data['created_by'], str(self.admin.id))

    @mock.patch('catalog.services.youtube.requests.get', side_effect=requests.Timeout('slow'))
    def test_video_is_created_even_when_metadata_fetch_fails(self, _get):
        response = self._create()
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['title'], 'YouTube Video')
        self.assertEqual(Video.objects.count(), 1)

    def test_invalid_youtube_url_is_rejected(self):
        response = self._create(url='https://vimeo.com/12345')
        self.assertEqual(response.status_code, 400)
        self.assertIn('youtube_url', response.data['fields'])
        self.assertEqual(Video.objects.count(), 0)

    @mock.patch('catalog.services.youtube.requests.get', return_value=oembed_response(404))
    def test_unknown_subject_is_rejected(self, _get):
        response = self._create(subject='HISTORY')
        self.assertEqual(response.status_code, 400)
        self.assertIn('subject', response.data['fields'])

    @mock.patch('catalog.services.youtube.requests.get', return_value=oembed_response(404))
    def test_update_and_delete(self, _get):
        video_id = self._create().data['id']

        response = self.client.put(f'/api/admin/videos/{video_id}/', {'description': 'Snell law'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['description'], 'Snell law')
        self.assertEqual(response.data['chapter'], 'Optics')

        response = self.client.delete(f'/api/admin/videos/{video_id}/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['message'], 'Video deleted successfully')
        self.assertFalse(Video.objects.exists())

    def test_missing_video_is_404(self):
        response = self.client.get('/api/admin/videos/00000000-0000-0000-0000-000000000000/')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['error'], 'Video not found')

    def test_malformed_id_is_json_404(self):
        for method in (self.client.get, self.client.put, self.client.delete):
            response = method('/api/admin/videos/not-a-uuid/')
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json(), {'error': 'Video not found'})

    def test_unknown_api_path_is_json_404(self):
        response = self.client.get('/api/no-such-endpoint/')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Not found'})

    def test_student_cannot_manage_videos(self):
        sign_in(self.client, self.student)
        response = self.client.get('/api/admin/videos/')
        self.assertEqual(response.status_code, 403)

    def test_anonymous_cannot_manage_videos(self):
        self.client.logout()
        response = self.client.get('/api/admin/videos/')
        self.assertEqual(response.status_code, 401)


class AdminQuestionTests(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        sign_in(self.client, self.admin)

    def _payload(self, **extra):
        data = {
            'class_level': '11',
            'subject': 'MATHEMATICS',
            'chapter': 'Algebra',
            'topic': 'Quadratics',
            'question_text': 'Solve $x^2=4$',
            'options': ['1', '2', '3', '4'],
            'correct_answer': 1,
            'difficulty': 'EASY',
            'explanation': 'x = 2',
        }
        data.update(extra)
        return data

    def test_create_question(self):
        response = self.client.post('/api/admin/questions/', self._payload())
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['options'], ['1', '2', '3', '4'])
        self.assertEqual(response.data['difficulty'], 'EASY')

    def test_difficulty_defaults_to_medium(self):
        data = self._payload()
        del data['difficulty']
        response = self.client.post('/api/admin/questions/', data)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['difficulty'], 'MEDIUM')

    def test_correct_answer_out_of_range_is_rejected(self):
        response = self.client.post('/api/admin/questions/', self._payload(correct_answer=4))
        self.assertEqual(response.status_code, 400)
        self.assertIn('Invalid correct answer index', response.data['error'])

    def test_single_option_is_rejected(self):
        response = self.client.post('/api/admin/questions/', self._payload(options=['only'], correct_answer=0))
        self.assertEqual(response.status_code, 400)
        self.assertIn('options', response.data['fields'])

    def test_update_checks_index_against_stored_options(self):
        question_id = self.client.post('/api/admin/questions/', self._payload()).data['id']
        response = self.client.put(f'/api/admin/questions/{question_id}/', {'correct_answer': 7})
        self.assertEqual(response.status_code, 400)

        response = self.client.put(f'/api/admin/questions/{question_id}/', {'correct_answer': 3})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Question.objects.get(pk=question_id).correct_answer, 3)

    def test_list_filters_by_difficulty(self):
        self.client.post('/api/admin/questions/', self._payload())
        self.client.post('/api/admin/questions/', self._payload(difficulty='HARD'))
        response = self.client.get('/api/admin/questions/', {'difficulty': 'HARD'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['difficulty'], 'HARD')


class PublicContentTests(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        for n, (class_level, subject) in enumerate([('11', 'PHYSICS'), ('11', 'CHEMISTRY'), ('JEE', 'PHYSICS'), ('12', 'PHYSICS')]):
            Video.objects.create(
                youtube_url=f'https://youtu.be/v{n}', youtube_id=f'v{n}', title=f'Video {n}',
                thumbnail=youtube.thumbnail_url(f'v{n}'),
                class_level=class_level, subject=subject, created_by=self.admin,
            )
        Question.objects.create(
            class_level='11', subject='PHYSICS', chapter='Kinematics', topic='Motion',
            question_text='Q1', options=['a', 'b'],
            correct_answer=0, difficulty='HARD', created_by=self.admin,
        )
        Question.objects.create(
            class_level='11', subject='PHYSICS', chapter='Kinematics', topic='Motion',
            question_text='Q2', options=['a', 'b'],
            correct_answer=1, difficulty='EASY', created_by=self.admin,
        )

    def test_videos_are_public_and_filtered_exactly(self):
        response = self.client.get('/api/student/videos/', {'class': '11', 'subject': 'PHYSICS'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([v['title'] for v in response.data], ['Video 0'])

    def test_video_limit(self):
        response = self.client.get('/api/student/videos/', {'subject': 'PHYSICS', 'limit': 2})
        self.assertEqual(len(response.data), 2)

    def test_questions_filter_by_difficulty(self):
        response = self.client.get('/api/student/questions/', {'class_level': '11', 'difficulty': 'EASY'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([q['question_text'] for q in response.data], ['Q2'])

    def test_recommended_without_session_is_latest(self):
        response = self.client.get('/api/videos/recommended/', {'limit': 3})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 3)

    def test_recommended_prefers_class_and_batch(self):
        student = make_profile('student@test.com', preferred_class_level='12', preferred_batch='JEE')
        sign_in(self.client, student)
        response = self.client.get('/api/videos/recommended/', {'limit': 2})
        self.assertEqual({v['class_level'] for v in response.data}, {'12', 'JEE'})

"""
Gulp Mock Tests
"""

from build_fixtures import GulpMock, create_gulp_mock
from build_fixtures.config_factory import FixtureConfig


class TestCreateGulpMock:
    """Test create_gulp_mock()"""

    def test_exposes_pipeline_methods(self):
        gulp = create_gulp_mock()

        for method in ('series', 'src', 'pipe', 'dest', 'watch'):
            assert callable(getattr(gulp, method))
        assert gulp.call_sequence == []

    def test_dest_returns_sentinel(self):
        gulp = create_gulp_mock()

        assert gulp.dest('dist') == '_dest_ret_'

    def test_dest_sentinel_comes_from_config(self):
        gulp = create_gulp_mock(FixtureConfig(dest_return_value='_written_'))

        assert gulp.dest('dist') == '_written_'

    def test_series_and_watch_return_callables(self):
        gulp = create_gulp_mock()

        series_ret = gulp.series('a', 'b')
        watch_ret = gulp.watch(['src/**'], series_ret)

        assert callable(series_ret)
        assert callable(watch_ret)
        assert series_ret() is None
        assert watch_ret() is None
        assert gulp.series() is series_ret

    def test_src_and_pipe_return_mock_for_chaining(self):
        gulp = create_gulp_mock()

        assert gulp.src('src/**') is gulp
        assert gulp.pipe('transform') is gulp

    def test_call_sequence_records_calls_in_order(self):
        gulp = create_gulp_mock()

        result = gulp.src('src/**').pipe('a').pipe('b').dest('dist')
        gulp.watch('src/**', gulp.series())

        assert result == '_dest_ret_'
        assert gulp.call_sequence == ['src', 'pipe', 'pipe', 'dest', 'series', 'watch']

    def test_stubs_record_arguments(self):
        gulp = create_gulp_mock()

        gulp.src(['a.py', 'b.py'], base='src')

        gulp.src.assert_called_once_with(['a.py', 'b.py'], base='src')
        assert gulp.pipe.call_count == 0

    def test_each_mock_has_its_own_sequence(self):
        first = create_gulp_mock()
        second = create_gulp_mock()

        first.src()

        assert first.call_sequence == ['src']
        assert second.call_sequence == []

    def test_reset(self):
        gulp = create_gulp_mock()
        gulp.src().dest('dist')

        gulp.reset()

        assert gulp.call_sequence == []
        assert gulp.src.call_count == 0
        assert gulp.dest('dist') == '_dest_ret_'

    def test_dest_can_return_none(self):
        gulp = GulpMock(dest_return_value=None)

        assert gulp.dest('dist') is None
        assert gulp.src('src/**') is gulp
        assert gulp.call_sequence == ['dest', 'src']

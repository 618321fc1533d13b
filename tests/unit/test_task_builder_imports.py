"""
Task Builder Import Helper Tests
"""

import pytest

from build_fixtures import (
    TaskBuilderImportMocks,
    TaskBuilderMock,
    create_fancy_log_mock,
    create_gulp_mock,
    create_module_importer,
    create_task_builder_import_definitions,
    create_task_builder_import_mocks,
    register_task_builder_mocks
)
from build_fixtures.builders import prepare_task_builder_specs
from build_fixtures.config_factory import FixtureConfig


class TestPrepareTaskBuilderSpecs:
    """Test derivation of task builder names"""

    def test_derived_names(self):
        spec, = prepare_task_builder_specs(['docker-build'])

        assert spec.name == 'docker-build'
        assert spec.ref_name == 'dockerBuildTaskBuilder'
        assert spec.import_key == 'dockerBuildTaskBuilderMock'
        assert spec.class_name == 'DockerBuildTaskBuilder'
        assert spec.import_path == 'src/task_builders/docker_build_task_builder.py'

    def test_raw_and_camel_names_share_a_path(self):
        raw, camel = prepare_task_builder_specs(['docker-build', 'dockerBuild'])

        assert raw.import_path == camel.import_path
        assert raw.import_key == camel.import_key

    def test_conventions_come_from_config(self):
        config = FixtureConfig(
            task_builder_dir='src/builders/',
            task_builder_suffix='Builder',
            import_key_suffix='Stub'
        )

        spec, = prepare_task_builder_specs(['lint'], config)

        assert spec.ref_name == 'lintBuilder'
        assert spec.import_key == 'lintBuilderStub'
        assert spec.class_name == 'LintBuilder'
        assert spec.import_path == 'src/builders/lint_task_builder.py'


class TestCreateTaskBuilderImportDefinitions:
    """Test create_task_builder_import_definitions()"""

    def test_one_entry_per_name(self):
        definitions = create_task_builder_import_definitions(['a', 'b'])

        assert definitions == {
            'aTaskBuilderMock': 'src/task_builders/a_task_builder.py',
            'bTaskBuilderMock': 'src/task_builders/b_task_builder.py'
        }

    def test_empty(self):
        assert create_task_builder_import_definitions([]) == {}


class TestCreateTaskBuilderImportMocks:
    """Test create_task_builder_import_mocks()"""

    def test_mocks_keyed_by_original_name(self):
        result = create_task_builder_import_mocks(['clean', 'docker-build'])

        assert isinstance(result, TaskBuilderImportMocks)
        assert set(result.mocks) == {'clean', 'docker-build'}
        assert all(isinstance(mock, TaskBuilderMock) for mock in result.mocks.values())
        assert result.mocks['docker-build']._name == 'docker-build'

    def test_references_expose_constructor_under_class_name(self):
        mocks, mock_references = create_task_builder_import_mocks(['x'])

        assert mock_references == {'xTaskBuilderMock': {'XTaskBuilder': mocks['x'].ctor}}
        assert mock_references['xTaskBuilderMock']['XTaskBuilder']() is mocks['x']

    def test_reference_keys_match_import_definitions(self):
        names = ['clean', 'docker-build', 'publish']

        _, mock_references = create_task_builder_import_mocks(names)

        assert set(mock_references) == set(create_task_builder_import_definitions(names))

    def test_each_call_creates_new_mocks(self):
        first = create_task_builder_import_mocks(['x'])
        second = create_task_builder_import_mocks(['x'])

        assert first.mocks['x'] is not second.mocks['x']


class TestRegisterTaskBuilderMocks:
    """Test constructor injection of task builder mocks"""

    def test_constructors_registered_under_class_names(self, container):
        mocks = register_task_builder_mocks(container, ['clean', 'docker-build'])

        assert container.get('CleanTaskBuilder') is mocks['clean'].ctor
        assert container.get('DockerBuildTaskBuilder') is mocks['docker-build'].ctor

    @pytest.mark.asyncio
    async def test_component_receives_mocks_through_constructor(self, container, sample_project_config):
        importer = create_module_importer('src/pipeline.py', {}, 'BuildPipeline', config=sample_project_config)
        BuildPipeline = await importer()
        gulp = create_gulp_mock()
        log = create_fancy_log_mock()
        container.set_external_dependencies({'gulp': gulp, 'log': log})
        mocks = register_task_builder_mocks(container, ['clean', 'docker-build'])
        container.register(
            'BuildPipeline', BuildPipeline,
            dependencies=['gulp', 'log', 'CleanTaskBuilder', 'DockerBuildTaskBuilder']
        )

        pipeline = container.get('BuildPipeline')
        definition = {'name': 'sample-project'}
        result = pipeline.create_tasks(definition)

        assert callable(result)
        assert gulp.call_sequence == ['series']
        tasks = gulp.series.call_args.args
        assert [task() for task in tasks] == ['_clean_task_ret_', '_docker-build_task_ret_']
        mocks['clean'].ctor.assert_called_once_with(definition)
        log.info.assert_called_once_with('Creating tasks for sample-project')

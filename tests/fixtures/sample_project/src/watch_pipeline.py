"""Copies static files and rebuilds them on change."""

import gulp
import fancy_log

STATIC_DIR = 'dist/static'


def copy_static(patterns):
    fancy_log.info('Copying static files')
    return gulp.src(patterns).pipe('noop').dest(STATIC_DIR)


def create_watch_task(patterns):
    def watch_task():
        return gulp.watch(patterns, gulp.series(lambda: copy_static(patterns)))
    return watch_task

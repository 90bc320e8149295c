import subprocess

import pytest

from orthodromic.utils import conditional_imports
from orthodromic.utils.conditional_imports import ConditionalPackageInterceptor


def test_permit_packages(monkeypatch):
    monkeypatch.setattr(ConditionalPackageInterceptor, 'PERMITTED_PACKAGES', {})

    ConditionalPackageInterceptor.permit_packages(['pkg_a'])
    ConditionalPackageInterceptor.permit_packages({'pkg_b': 'orthodromic[b]'})
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES == {
        'pkg_a': 'pkg_a',
        'pkg_b': 'orthodromic[b]',
    }

    with pytest.raises(TypeError):
        ConditionalPackageInterceptor.permit_packages('pkg_c')


def test_geographiclib_registered():
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['geographiclib'] == 'orthodromic[karney]'


def test_find_spec_unpermitted():
    assert ConditionalPackageInterceptor.find_spec('definitely_not_a_package', None) is None


def test_find_spec_permitted(monkeypatch):
    monkeypatch.setattr(
        ConditionalPackageInterceptor,
        'PERMITTED_PACKAGES',
        {'definitely_not_a_package': 'orthodromic[fake]'}
    )

    with pytest.raises(ModuleNotFoundError, match=r'pip install orthodromic\[fake\]'):
        import definitely_not_a_package  # noqa: F401  pylint: disable=import-outside-toplevel,unused-import


def test_find_spec_auto_download_failure(monkeypatch):
    monkeypatch.setattr(
        ConditionalPackageInterceptor,
        'PERMITTED_PACKAGES',
        {'definitely_not_a_package': 'orthodromic[fake]'}
    )
    monkeypatch.setattr(ConditionalPackageInterceptor, 'AUTO_DOWNLOAD', True)

    calls = []

    def fake_run(args, check):
        calls.append(args)
        raise subprocess.CalledProcessError(1, args)

    monkeypatch.setattr(conditional_imports.subprocess, 'run', fake_run)

    assert ConditionalPackageInterceptor.find_spec('definitely_not_a_package', None) is None
    assert calls[0][-1] == 'orthodromic[fake]'

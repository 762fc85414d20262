"""Tests for upload services."""
import os
from pathlib import Path

import pytest

from cloudinarypy.core.api import ResourceType
from cloudinarypy.core.upload.services import FileValidator, derive_public_id, walk_files


class TestDerivePublicId:
    """Test suite for derive_public_id."""
    
    def test_image_strips_extension(self):
        assert derive_public_id('/tmp/images/logo.png') == 'images/logo'
    
    def test_raw_keeps_extension(self):
        assert derive_public_id('/tmp/css/default.css', ResourceType.RAW) == 'css/default.css'
    
    def test_only_last_extension_stripped(self):
        assert derive_public_id('/data/backups/site.tar.gz') == 'backups/site.tar'
    
    def test_only_parent_directory_kept(self):
        """Test deeper ancestors are not part of the id."""
        assert derive_public_id('/a/b/c/d/photo.jpg') == 'd/photo'
    
    def test_bare_file_name(self):
        assert derive_public_id('logo.png') == 'logo'
    
    def test_string_resource_type(self):
        assert derive_public_id('/tmp/js/app.js', 'raw') == 'js/app.js'


class TestWalkFiles:
    """Test suite for walk_files."""
    
    def test_depth_first_sorted(self, asset_tree):
        """Test files are yielded depth-first in name order."""
        files = [p.relative_to(asset_tree).as_posix() for p in walk_files(asset_tree)]
        
        assert files == ['css/default.css', 'images/icons/a.png', 'images/logo.png']
    
    def test_directories_not_yielded(self, asset_tree):
        assert all(p.is_file() for p in walk_files(asset_tree))
    
    def test_empty_directory(self, tmp_path):
        assert list(walk_files(tmp_path)) == []
    
    def test_missing_directory(self, tmp_path):
        """Test listing error propagates."""
        with pytest.raises(FileNotFoundError):
            list(walk_files(tmp_path / 'nope'))
    
    @pytest.mark.skipif(not hasattr(os, 'symlink'), reason="symlinks unsupported")
    def test_symlinked_directory_not_followed(self, asset_tree, tmp_path):
        link = asset_tree / 'linked'
        try:
            link.symlink_to(asset_tree / 'css', target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlink")
        
        files = [p.relative_to(asset_tree).as_posix() for p in walk_files(asset_tree)]
        
        assert 'linked/default.css' not in files


class TestFileValidator:
    """Test suite for FileValidator."""
    
    @pytest.fixture
    def validator(self):
        return FileValidator()
    
    def test_validate_existing_file(self, validator, asset_tree):
        path, size = validator.validate(asset_tree / 'css' / 'default.css')
        
        assert size == len('body { color: red; }')
    
    def test_validate_string_path(self, validator, asset_tree):
        path, _ = validator.validate(str(asset_tree / 'css' / 'default.css'))
        
        assert isinstance(path, Path)
    
    def test_validate_nonexistent_file(self, validator):
        with pytest.raises(FileNotFoundError):
            validator.validate(Path('/nonexistent/file.txt'))
    
    def test_validate_directory(self, validator, asset_tree):
        with pytest.raises(ValueError, match="not a file"):
            validator.validate(asset_tree)

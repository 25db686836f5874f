# Auto-generated __init__.py

from . import conftest
from .conftest import stub_akinus_modules
from . import test_buffers
from .test_buffers import test_byte_values_match_bytes
from .test_buffers import test_bytearray_and_memoryview
from .test_buffers import test_bytes_returned_unchanged
from .test_buffers import test_mapping_values_in_order
from .test_buffers import test_numpy_array
from .test_buffers import test_numpy_float_array_rejected
from .test_buffers import test_numpy_out_of_range_rejected
from .test_buffers import test_unsupported_shapes
from . import test_fingerprint
from .test_fingerprint import sample_files
from .test_fingerprint import test_directory_fingerprint
from .test_fingerprint import test_directory_fingerprint_logs
from .test_fingerprint import test_empty_file_set
from .test_fingerprint import test_fingerprint_changes_with_one_byte
from .test_fingerprint import test_fingerprint_changes_with_path
from .test_fingerprint import test_fingerprint_does_not_reorder_input
from .test_fingerprint import test_fingerprint_ignores_write_options
from .test_fingerprint import test_fingerprint_is_32_bytes
from .test_fingerprint import test_fingerprint_matches_documented_layout
from .test_fingerprint import test_fingerprint_order_independent
from . import test_inventory
from .test_inventory import sample_context
from .test_inventory import test_ansible_inventory_from_mapping
from .test_inventory import test_ansible_inventory_shape
from .test_inventory import test_create_inventory_generator_raises
from .test_inventory import test_create_inventory_invalid_context
from .test_inventory import test_create_inventory_invalid_result
from .test_inventory import test_create_inventory_keeps_unicode
from .test_inventory import test_create_inventory_not_callable
from .test_inventory import test_create_inventory_record
from .test_inventory import test_create_inventory_rejects_nan
from .test_inventory import test_create_inventory_serialization_failure
from .test_inventory import test_load_generator_invalid_reference
from .test_inventory import test_load_generator_missing_callable
from .test_inventory import test_load_generator_missing_module
from .test_inventory import test_load_generator_resolves_reference
from . import test_keys
from .test_keys import test_key_pair_files_records
from .test_keys import test_key_pair_written_with_modes
from . import test_models
from .test_models import test_backslash_is_a_plain_character_on_posix
from .test_models import test_file_record_accepts_matching_path
from .test_models import test_file_record_defaults
from .test_models import test_file_record_derives_path
from .test_models import test_file_record_is_frozen
from .test_models import test_file_record_normalizes_data
from .test_models import test_file_record_rejects_bad_names
from .test_models import test_file_record_rejects_disagreeing_path
from .test_models import test_file_record_rejects_escaping_parent
from .test_models import test_sort_key
from .test_models import test_write_options_rejects_unknown_flag
from . import test_paths
from .test_paths import test_canonical_parent_forms
from .test_paths import test_canonical_parent_rejects_escape
from .test_paths import test_join_parent
from .test_paths import test_resolve_relative_allows_dotdot_prefixed_names
from .test_paths import test_resolve_relative_deeper_path_uses_forward_slashes
from .test_paths import test_resolve_relative_nested_file
from .test_paths import test_resolve_relative_rejects_sibling
from .test_paths import test_resolve_relative_rejects_traversal
from .test_paths import test_resolve_relative_same_directory_is_empty
from . import test_scanner
from .test_scanner import by_path
from .test_scanner import test_backslash_names_round_trip
from .test_scanner import test_non_utf8_name_round_trip
from .test_scanner import test_walk_directory_async
from .test_scanner import test_walk_directory_basic
from .test_scanner import test_walk_directory_wrapper_under_running_loop
from .test_scanner import test_walk_empty_directory
from .test_scanner import test_walk_entry_vanishing_aborts
from .test_scanner import test_walk_logs_summary
from .test_scanner import test_walk_missing_directory_raises
from .test_scanner import test_walk_skips_symlinks
from .test_scanner import test_walk_unreadable_file_aborts
from . import test_workspace
from .test_workspace import context
from .test_workspace import make_source
from .test_workspace import test_prepare_workspace_changes_when_source_changes
from .test_workspace import test_prepare_workspace_copies_and_generates
from .test_workspace import test_prepare_workspace_extra_files
from .test_workspace import test_prepare_workspace_generator_failure_writes_nothing
from .test_workspace import test_prepare_workspace_sync_is_stable
from .test_workspace import write_file
from . import test_writer
from .test_writer import sample_files
from .test_writer import test_ensure_directory_file_in_the_way
from .test_writer import test_ensure_directory_missing
from .test_writer import test_ensure_directory_twice
from .test_writer import test_fingerprint_reflects_memory_not_disk
from .test_writer import test_write_append_flag
from .test_writer import test_write_applies_mode
from .test_writer import test_write_duplicates_last_wins_and_warns
from .test_writer import test_write_exclusive_flag_fails_when_present
from .test_writer import test_write_files_async
from .test_writer import test_write_files_end_to_end
from .test_writer import test_write_into_read_only_directory
from .test_writer import test_write_is_not_transactional
from .test_writer import test_write_refuses_record_outside_work_directory
from .test_writer import test_write_then_walk_round_trip
from .test_writer import test_write_truncates_existing_file

__all__ = [
    "conftest",
    "test_buffers",
    "test_fingerprint",
    "test_inventory",
    "test_keys",
    "test_models",
    "test_paths",
    "test_scanner",
    "test_workspace",
    "test_writer",
    "by_path",
    "context",
    "make_source",
    "sample_context",
    "sample_files",
    "stub_akinus_modules",
    "test_ansible_inventory_from_mapping",
    "test_ansible_inventory_shape",
    "test_backslash_is_a_plain_character_on_posix",
    "test_backslash_names_round_trip",
    "test_byte_values_match_bytes",
    "test_bytearray_and_memoryview",
    "test_bytes_returned_unchanged",
    "test_canonical_parent_forms",
    "test_canonical_parent_rejects_escape",
    "test_create_inventory_generator_raises",
    "test_create_inventory_invalid_context",
    "test_create_inventory_invalid_result",
    "test_create_inventory_keeps_unicode",
    "test_create_inventory_not_callable",
    "test_create_inventory_record",
    "test_create_inventory_rejects_nan",
    "test_create_inventory_serialization_failure",
    "test_directory_fingerprint",
    "test_directory_fingerprint_logs",
    "test_empty_file_set",
    "test_ensure_directory_file_in_the_way",
    "test_ensure_directory_missing",
    "test_ensure_directory_twice",
    "test_file_record_accepts_matching_path",
    "test_file_record_defaults",
    "test_file_record_derives_path",
    "test_file_record_is_frozen",
    "test_file_record_normalizes_data",
    "test_file_record_rejects_bad_names",
    "test_file_record_rejects_disagreeing_path",
    "test_file_record_rejects_escaping_parent",
    "test_fingerprint_changes_with_one_byte",
    "test_fingerprint_changes_with_path",
    "test_fingerprint_does_not_reorder_input",
    "test_fingerprint_ignores_write_options",
    "test_fingerprint_is_32_bytes",
    "test_fingerprint_matches_documented_layout",
    "test_fingerprint_order_independent",
    "test_fingerprint_reflects_memory_not_disk",
    "test_join_parent",
    "test_key_pair_files_records",
    "test_key_pair_written_with_modes",
    "test_load_generator_invalid_reference",
    "test_load_generator_missing_callable",
    "test_load_generator_missing_module",
    "test_load_generator_resolves_reference",
    "test_mapping_values_in_order",
    "test_non_utf8_name_round_trip",
    "test_numpy_array",
    "test_numpy_float_array_rejected",
    "test_numpy_out_of_range_rejected",
    "test_prepare_workspace_changes_when_source_changes",
    "test_prepare_workspace_copies_and_generates",
    "test_prepare_workspace_extra_files",
    "test_prepare_workspace_generator_failure_writes_nothing",
    "test_prepare_workspace_sync_is_stable",
    "test_resolve_relative_allows_dotdot_prefixed_names",
    "test_resolve_relative_deeper_path_uses_forward_slashes",
    "test_resolve_relative_nested_file",
    "test_resolve_relative_rejects_sibling",
    "test_resolve_relative_rejects_traversal",
    "test_resolve_relative_same_directory_is_empty",
    "test_sort_key",
    "test_unsupported_shapes",
    "test_walk_directory_async",
    "test_walk_directory_basic",
    "test_walk_directory_wrapper_under_running_loop",
    "test_walk_empty_directory",
    "test_walk_entry_vanishing_aborts",
    "test_walk_logs_summary",
    "test_walk_missing_directory_raises",
    "test_walk_skips_symlinks",
    "test_walk_unreadable_file_aborts",
    "test_write_append_flag",
    "test_write_applies_mode",
    "test_write_duplicates_last_wins_and_warns",
    "test_write_exclusive_flag_fails_when_present",
    "test_write_files_async",
    "test_write_files_end_to_end",
    "test_write_into_read_only_directory",
    "test_write_is_not_transactional",
    "test_write_options_rejects_unknown_flag",
    "test_write_refuses_record_outside_work_directory",
    "test_write_then_walk_round_trip",
    "test_write_truncates_existing_file",
    "write_file",
]

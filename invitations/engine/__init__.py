# Invitation Block Engine

from .color_schemes import (
    EventCategory,
    EVENT_CATEGORIES,
    DEFAULT_COLOR_SCHEMES,
    NEUTRAL_CATEGORY,
    NEUTRAL_COLOR_SCHEME,
    default_scheme_for,
    is_known_category,
    is_valid_scheme,
    list_categories,
    normalize_category,
    with_color,
)

from .config_builder import (
    build_default_config,
    default_blocks_for,
    default_styles_for,
)

from .reconcile import (
    StructuralError,
    reconcile,
)

from .editing import (
    change_event_type,
    reorder,
    set_enabled,
    sorted_blocks,
    toggle,
    update_color,
)

from .render_resolver import resolve

from .presenters import (
    BlockPresenter,
    get_presenter,
    present,
    seed_block_content,
)

from .settings_document import (
    EventSettings,
    dump_settings,
    load_settings,
    update_block_content,
)

__all__ = [
    # Color schemes
    'EventCategory',
    'EVENT_CATEGORIES',
    'DEFAULT_COLOR_SCHEMES',
    'NEUTRAL_CATEGORY',
    'NEUTRAL_COLOR_SCHEME',
    'default_scheme_for',
    'is_known_category',
    'is_valid_scheme',
    'list_categories',
    'normalize_category',
    'with_color',
    # Builder
    'build_default_config',
    'default_blocks_for',
    'default_styles_for',
    # Reconcile
    'StructuralError',
    'reconcile',
    # Editing
    'change_event_type',
    'reorder',
    'set_enabled',
    'sorted_blocks',
    'toggle',
    'update_color',
    # Rendering
    'resolve',
    'BlockPresenter',
    'get_presenter',
    'present',
    'seed_block_content',
    # Settings document
    'EventSettings',
    'dump_settings',
    'load_settings',
    'update_block_content',
]

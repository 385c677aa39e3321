"""Database schema and table constants."""

# =============================================================================
# Schema Names
# =============================================================================
BOARDS_SCHEMA = "boards"

# =============================================================================
# Table Names (boards schema)
# =============================================================================
BOARD_CATEGORIES_TABLE = "board_categories"
BOARDS_TABLE = "boards"
BOARD_PRODUCT_TAGS_TABLE = "board_product_tags"
BOARD_LIKES_TABLE = "board_likes"
BOARD_BOOKMARKS_TABLE = "board_bookmarks"

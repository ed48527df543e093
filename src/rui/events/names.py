"""Event property tags and the number of payload values each one delivers."""

# Focus
FOCUS_EVENT = "focus-event"
LOST_FOCUS_EVENT = "lost-focus-event"

# Keyboard
KEY_DOWN_EVENT = "key-down-event"
KEY_UP_EVENT = "key-up-event"

# Mouse
CLICK_EVENT = "click-event"
DOUBLE_CLICK_EVENT = "double-click-event"
MOUSE_DOWN = "mouse-down"
MOUSE_UP = "mouse-up"
MOUSE_MOVE = "mouse-move"
MOUSE_OUT = "mouse-out"
MOUSE_OVER = "mouse-over"
CONTEXT_MENU_EVENT = "context-menu-event"

# Pointer
POINTER_DOWN = "pointer-down"
POINTER_UP = "pointer-up"
POINTER_MOVE = "pointer-move"
POINTER_CANCEL = "pointer-cancel"
POINTER_OUT = "pointer-out"
POINTER_OVER = "pointer-over"

# Touch
TOUCH_START = "touch-start"
TOUCH_END = "touch-end"
TOUCH_MOVE = "touch-move"
TOUCH_CANCEL = "touch-cancel"

# Transitions and animations
TRANSITION_RUN_EVENT = "transition-run-event"
TRANSITION_START_EVENT = "transition-start-event"
TRANSITION_END_EVENT = "transition-end-event"
TRANSITION_CANCEL_EVENT = "transition-cancel-event"
ANIMATION_START_EVENT = "animation-start-event"
ANIMATION_END_EVENT = "animation-end-event"
ANIMATION_ITERATION_EVENT = "animation-iteration-event"
ANIMATION_CANCEL_EVENT = "animation-cancel-event"

# Geometry
RESIZE_EVENT = "resize-event"
SCROLL_EVENT = "scroll-event"

# Widgets
CHECKBOX_CHANGED_EVENT = "checkbox-event"
CURRENT_TAB_CHANGED_EVENT = "current-tab-changed"
TAB_CLOSE_EVENT = "tab-close-event"
DISMISS_EVENT = "dismiss-event"
IMAGE_LOADED_EVENT = "loaded-event"
IMAGE_ERROR_EVENT = "error-event"

# Inputs, lists and tables
NUMBER_CHANGED_EVENT = "number-changed"
DATE_CHANGED_EVENT = "date-changed"
TIME_CHANGED_EVENT = "time-changed"
COLOR_CHANGED_EVENT = "color-changed"
DROP_DOWN_EVENT = "drop-down-event"
EDIT_TEXT_CHANGED_EVENT = "edit-text-changed"
LIST_ITEM_CLICKED_EVENT = "list-item-clicked"
LIST_ITEM_SELECTED_EVENT = "list-item-selected"
LIST_ITEM_CHECKED_EVENT = "list-item-checked"
TABLE_CELL_CLICKED_EVENT = "table-cell-clicked"
TABLE_CELL_SELECTED_EVENT = "table-cell-selected"
TABLE_ROW_CLICKED_EVENT = "table-row-clicked"
TABLE_ROW_SELECTED_EVENT = "table-row-selected"

# Media players
ABORT_EVENT = "abort-event"
CAN_PLAY_EVENT = "can-play-event"
CAN_PLAY_THROUGH_EVENT = "can-play-through-event"
COMPLETE_EVENT = "complete-event"
DURATION_CHANGED_EVENT = "duration-changed-event"
EMPTIED_EVENT = "emptied-event"
ENDED_EVENT = "ended-event"
LOADED_DATA_EVENT = "loaded-data-event"
LOADED_METADATA_EVENT = "loaded-metadata-event"
LOAD_START_EVENT = "load-start-event"
PAUSE_EVENT = "pause-event"
PLAY_EVENT = "play-event"
PLAYING_EVENT = "playing-event"
PROGRESS_EVENT = "progress-event"
RATE_CHANGED_EVENT = "rate-changed-event"
SEEKED_EVENT = "seeked-event"
SEEKING_EVENT = "seeking-event"
STALLED_EVENT = "stalled-event"
SUSPEND_EVENT = "suspend-event"
TIME_UPDATE_EVENT = "time-update-event"
VOLUME_CHANGED_EVENT = "volume-changed-event"
WAITING_EVENT = "waiting-event"
PLAYER_ERROR_EVENT = "player-error-event"

MOUSE_EVENTS = (
    CLICK_EVENT, DOUBLE_CLICK_EVENT, MOUSE_DOWN, MOUSE_UP, MOUSE_MOVE, MOUSE_OUT, MOUSE_OVER,
    CONTEXT_MENU_EVENT,
)
POINTER_EVENTS = (POINTER_DOWN, POINTER_UP, POINTER_MOVE, POINTER_CANCEL, POINTER_OUT, POINTER_OVER)
TOUCH_EVENTS = (TOUCH_START, TOUCH_END, TOUCH_MOVE, TOUCH_CANCEL)
KEY_EVENTS = (KEY_DOWN_EVENT, KEY_UP_EVENT)
FOCUS_EVENTS = (FOCUS_EVENT, LOST_FOCUS_EVENT)
TRANSITION_EVENTS = (
    TRANSITION_RUN_EVENT, TRANSITION_START_EVENT, TRANSITION_END_EVENT, TRANSITION_CANCEL_EVENT,
)
ANIMATION_EVENTS = (
    ANIMATION_START_EVENT, ANIMATION_END_EVENT, ANIMATION_ITERATION_EVENT, ANIMATION_CANCEL_EVENT,
)
MEDIA_EVENTS = (
    ABORT_EVENT, CAN_PLAY_EVENT, CAN_PLAY_THROUGH_EVENT, COMPLETE_EVENT, EMPTIED_EVENT, ENDED_EVENT,
    LOADED_DATA_EVENT, LOADED_METADATA_EVENT, LOAD_START_EVENT, PAUSE_EVENT, PLAY_EVENT,
    PLAYING_EVENT, PROGRESS_EVENT, SEEKED_EVENT, SEEKING_EVENT, STALLED_EVENT, SUSPEND_EVENT,
    WAITING_EVENT,
)
MEDIA_VALUE_EVENTS = (DURATION_CHANGED_EVENT, RATE_CHANGED_EVENT, TIME_UPDATE_EVENT, VOLUME_CHANGED_EVENT)
# Listeners get (new value, old value)
VALUE_CHANGED_EVENTS = (
    NUMBER_CHANGED_EVENT, DATE_CHANGED_EVENT, TIME_CHANGED_EVENT, COLOR_CHANGED_EVENT, DROP_DOWN_EVENT,
    EDIT_TEXT_CHANGED_EVENT,
)
LIST_EVENTS = (LIST_ITEM_CLICKED_EVENT, LIST_ITEM_SELECTED_EVENT, LIST_ITEM_CHECKED_EVENT)
TABLE_EVENTS = (
    TABLE_CELL_CLICKED_EVENT, TABLE_CELL_SELECTED_EVENT, TABLE_ROW_CLICKED_EVENT, TABLE_ROW_SELECTED_EVENT,
)

# Payload values passed after the view; unlisted events pass one
_NO_PAYLOAD = FOCUS_EVENTS + MEDIA_EVENTS + (DISMISS_EVENT, IMAGE_LOADED_EVENT)
EVENT_PAYLOAD_COUNT: dict[str, int] = {tag: 0 for tag in _NO_PAYLOAD}
EVENT_PAYLOAD_COUNT[CURRENT_TAB_CHANGED_EVENT] = 2
EVENT_PAYLOAD_COUNT[PLAYER_ERROR_EVENT] = 2
EVENT_PAYLOAD_COUNT.update(
    {tag: 2 for tag in VALUE_CHANGED_EVENTS + (TABLE_CELL_CLICKED_EVENT, TABLE_CELL_SELECTED_EVENT)}
)

ALL_EVENTS = frozenset(
    MOUSE_EVENTS + POINTER_EVENTS + TOUCH_EVENTS + KEY_EVENTS + FOCUS_EVENTS + TRANSITION_EVENTS
    + ANIMATION_EVENTS + MEDIA_EVENTS + MEDIA_VALUE_EVENTS + VALUE_CHANGED_EVENTS + LIST_EVENTS + TABLE_EVENTS
    + (
        RESIZE_EVENT, SCROLL_EVENT, CHECKBOX_CHANGED_EVENT, CURRENT_TAB_CHANGED_EVENT,
        TAB_CLOSE_EVENT, DISMISS_EVENT, IMAGE_LOADED_EVENT, IMAGE_ERROR_EVENT, PLAYER_ERROR_EVENT,
    )
)


def payload_count(tag: str) -> int:
    return EVENT_PAYLOAD_COUNT.get(tag, 1)

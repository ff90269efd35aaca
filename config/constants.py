# Emoji blocks (inclusive code point ranges)
EMOJI_BLOCKS = {
    'emoticons': (0x1F600, 0x1F64F),
    'misc_symbols_pictographs': (0x1F300, 0x1F5FF),
    'transport_map': (0x1F680, 0x1F6FF),
    'misc_symbols': (0x2600, 0x26FF),
    'dingbats': (0x2700, 0x27BF),
}

# Katakana ranges
FULLWIDTH_KATAKANA = (0x30A1, 0x30F6)  # ァ..ヶ
HALFWIDTH_KATAKANA = (0xFF66, 0xFF9D)  # ｦ..ﾝ

# Characters refused by plain form fields
SPECIAL_CHARACTERS = '\\/:*?"-<>~,;|#%{}&$@!\'+=^()[]'

# Default symbols refused by the username field
USERNAME_SYMBOLS = "!@#$"

# Preset labels
PRESET_LABELS = {
    'letters_underscore': 'Letters and underscore only',
    'digits_only': 'Digits only',
    'whitespace_symbols': 'No spaces or !@#$',
    'katakana': 'No katakana',
    'emoji': 'No emoji',
    'name_field': 'No punctuation or symbols',
    'ascii_digits_only': 'ASCII digits only',
    'special_characters': 'No special characters',
}

# Violation messages ({label} = field name, {chars} = stripped characters)
VIOLATION_MESSAGE_TEMPLATE = "{label} cannot contain <b>{chars}</b> character !!!"
NAME_MESSAGE_TEMPLATE = "Forbidden character entered: {chars}"
AGE_MESSAGE_TEMPLATE = "Please enter digits only"
CUSTOM_MESSAGE_TEMPLATE = "Disallowed characters found: {chars}"

# Usage card shown on the main window
USAGE_SNIPPET = """field = RestrictedTextField(
    hint="i_neko",
    characters=presets.whitespace_and_symbols(),
)
field.error_changed.connect(show_message)"""

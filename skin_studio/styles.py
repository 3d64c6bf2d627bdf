from . import config_manager

THEME = config_manager.CONFIG['theme']


def get_stylesheet():
    return f"""
    /* === GLOBAL RESET === */
    QWidget {{
        font-family: '{THEME['font_family_ui']}', sans-serif;
        font-size: {THEME['font_size']};
        color: {THEME['text_header']};
    }}

    /* === MAIN WINDOW === */
    QMainWindow {{
        background-color: {THEME['window_bg']};
    }}

    /* === DOCK WIDGETS === */
    QDockWidget {{
        border: none;
    }}

    QDockWidget::title {{
        background: {THEME['panel_bg']};
        padding: 6px;
    }}

    /* === PANEL CONTENT === */
    QFrame#PanelContent {{
        background-color: {THEME['panel_bg']};
        border-bottom: 1px solid {THEME['border_color']};
    }}

    /* === BUTTONS === */
    QPushButton {{
        background-color: {THEME['btn_default']};
        color: {THEME['btn_text']};
        border-radius: 6px;
        padding: 6px;
        font-weight: 600;
        border: 1px solid transparent;
    }}

    QPushButton:hover {{
        border: 1px solid {THEME['btn_accent']};
    }}

    QPushButton:checked, QPushButton#AccentBtn {{
        background-color: {THEME['btn_accent']};
        color: black;
    }}

    /* === LAYER LIST === */
    QListWidget {{ background-color: transparent; border: none; outline: none; }}
    QListWidget::item {{ padding: 4px; border-radius: 4px; }}
    QListWidget::item:selected {{
        border-left: 3px solid {THEME['btn_accent']};
        color: {THEME['text_header']};
    }}

    QSlider::groove:horizontal {{ background: {THEME['border_color']}; height: 6px; border-radius: 3px; }}
    QSlider::handle:horizontal {{ background: {THEME['btn_accent']}; width: 14px; margin: -4px 0; border-radius: 7px; }}
    """

from __future__ import annotations

from invoicer.styles.tokens import Colors, Paper, Radius, Space


def light_qss() -> str:
    c = Colors
    r = Radius
    s = Space
    return f"""
    QWidget {{ font-size: 13px; background: {c.bg}; color: {c.text}; }}
    QWidget#Header {{ background: {c.card}; border-bottom: 1px solid {c.border}; }}
    QFrame#Card {{ border: 1px solid {c.border}; border-radius: {r.md}px; background: {c.card}; }}
    QFrame#CardRow {{ border:1px solid {c.border}; border-radius:{r.md}px; background:{c.card}; padding:{s.xs}px; }}
    QLabel#SectionTitle {{ font-size: 14px; font-weight: 700; color: {c.subtext}; padding: 2px 2px 0 2px; }}
    QLabel#LogoPreview {{ border: 1px dashed {c.input_border}; border-radius: {r.sm}px; color: #888; }}
    QLineEdit, QComboBox {{
        border: 1px solid {c.input_border}; border-radius: {r.sm}px; padding: {s.xs}px {s.sm}px; background: {c.card};
    }}
    QLineEdit:focus, QComboBox:focus {{ border: 1px solid {c.primary}; }}
    QPushButton {{ padding: 7px 14px; border-radius: {r.sm}px; border: 1px solid {c.border}; background: {c.card}; }}
    QPushButton:hover {{ background: #f3f6ff; border-color: #b8c6ff; }}
    QPushButton:disabled {{ color: #999; background: #f0f0f0; }}
    QPushButton#Primary {{ background: {c.primary}; color: #fff; border-color: {c.primary}; }}
    QPushButton#Primary:hover {{ background: {c.primary_hover}; }}
    QPushButton#Danger {{ background: {c.danger}; color: #fff; border-color: {c.danger}; }}
    QPushButton#Danger:hover {{ background: {c.danger_hover}; }}
    QTabBar::tab {{ padding: 6px 14px; border: 1px solid {c.border}; border-bottom: none; background: {c.bg}; }}
    QTabBar::tab:selected {{ background: {c.card}; color: {c.primary}; font-weight: 600; }}
    """


def dark_qss() -> str:
    c = Colors
    r = Radius
    s = Space
    return f"""
    QWidget {{ font-size: 13px; background: {c.bg_dark}; color: {c.text_dark}; }}
    QWidget#Header {{ background: {c.card_dark}; border-bottom: 1px solid {c.border_dark}; }}
    QFrame#Card {{ border: 1px solid {c.border_dark}; border-radius: {r.md}px; background: {c.card_dark}; }}
    QFrame#CardRow {{ border:1px solid #555; border-radius:{r.md}px; background:#3a3a3a; padding:{s.xs}px; }}
    QLabel#SectionTitle {{ font-size: 14px; font-weight: 700; color: {c.text_dark}; padding: 2px 2px 0 2px; }}
    QLabel#LogoPreview {{ border: 1px dashed {c.input_border_dark}; border-radius: {r.sm}px; color: #aaa; }}
    QLineEdit, QComboBox {{
        border: 1px solid {c.input_border_dark}; border-radius: {r.sm}px; padding: {s.xs}px {s.sm}px; background: #2e2e2e; color:{c.text_dark};
    }}
    QLineEdit:focus, QComboBox:focus {{ border: 1px solid {c.primary_dark}; }}
    QPushButton {{ padding: 7px 14px; border-radius: {r.sm}px; border: 1px solid {c.input_border_dark}; background: #3a3a3a; color: {c.text_dark}; }}
    QPushButton:hover {{ background: #414141; border-color: #6a6a6a; }}
    QPushButton:disabled {{ color: #777; }}
    QPushButton#Primary {{ background: {c.primary_dark}; color: #111; border-color: {c.primary_dark}; }}
    QPushButton#Danger {{ background: {c.danger_dark}; color: #111; border-color: {c.danger_dark}; }}
    QTabBar::tab {{ padding: 6px 14px; border: 1px solid {c.border_dark}; border-bottom: none; background: {c.bg_dark}; }}
    QTabBar::tab:selected {{ background: {c.card_dark}; color: {c.primary_dark}; font-weight: 600; }}
    """


def paper_qss() -> str:
    """Fixed light palette for the printable sheet, applied on the sheet itself."""
    p = Paper
    return f"""
    QFrame#InvoicePaper {{ background: {p.background}; color: {p.text}; }}
    QFrame#InvoicePaper QLabel {{ background: transparent; color: {p.text}; }}
    QLabel#PaperTitle {{ font-size: 26px; font-weight: 700; color: {p.ink}; }}
    QLabel#PaperCompany {{ font-size: 16px; font-weight: 700; }}
    QLabel#PaperBrand {{ font-size: 20px; font-weight: 800; color: {p.brand_red}; }}
    QLabel#PaperArabic {{ font-size: 15px; }}
    QLabel#PaperLogoPlaceholder {{ border: 1px dashed {p.placeholder}; color: {p.placeholder}; }}
    QLabel#PaperGrand {{ font-weight: 700; }}
    QLabel#PaperWords {{ font-style: italic; }}
    QLabel#PaperFooter {{ color: {p.muted}; font-size: 11px; }}
    QFrame#PaperRule {{ background: {p.ink}; }}
    QTableWidget#PaperItems {{ background: {p.background}; color: {p.text}; gridline-color: {p.ink}; border: 1px solid {p.ink}; }}
    QTableWidget#PaperItems QHeaderView::section {{
        background: {p.table_head}; color: {p.ink}; font-weight: 700; border: 1px solid {p.ink}; padding: 2px;
    }}
    """

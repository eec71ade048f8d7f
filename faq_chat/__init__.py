"""faq-chat - keyword retrieval Q&A over a static FAQ collection"""

__version__ = "1.0.0"

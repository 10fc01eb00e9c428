from formkit.app.singleton import Singleton
from formkit.io import env as fk_env


class JinjaWidgets(metaclass=Singleton):
    def __init__(self, auto_widget_id=None):
        if auto_widget_id is None:
            auto_widget_id = fk_env.auto_widget_id()
        self.auto_widget_id = auto_widget_id
        self.context = {}
        self.context["__no_html_mode__"] = auto_widget_id

from html import escape

from .builders import BaseRequest


FORM_ID = "newebpay-form"


class FormBuilder:
    """生成自动提交到蓝新的 HTML 表单，用于电子地图等需要浏览器跳转的请求"""

    def build(self, request: BaseRequest, with_script: bool = True) -> str:
        form = request.get_payload().to_form()
        html = f'<form id="{FORM_ID}" action="{escape(request.get_url())}" method="post">'
        for key, value in form.items():
            html += (
                f'<input type="hidden" name="{escape(str(key))}" '
                f'value="{escape(str(value))}">'
            )
        html += '<button type="submit">Submit</button>'
        html += "</form>"
        if with_script:
            html += f'<script>document.getElementById("{FORM_ID}").submit();</script>'
        return html

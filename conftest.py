"""
Shared fixtures: a trimmed copy of the RU menu page and fake HTTP responses.
"""
from unittest import mock

import pytest
import requests

from ufpr_ru_lib.webpage import JARDIM_BOTANICO


SAMPLE_MENU_PAGE = """<!DOCTYPE html>
<html lang="pt-BR">
<head><meta charset="utf-8"><title>Cardápio RU Jardim Botânico – PRA</title></head>
<body>
<div class="entry-content">
<p>Confira abaixo o cardápio da semana. Os ícones indicam pratos veganos e com glúten.</p>
<figure class="wp-block-table"><table><tbody>
<tr><td>ALMOÇO</td></tr>
<tr><td>Tabela de avisos</td></tr>
</tbody></table></figure>
<p><strong>Segunda-feira 25/03/24</strong></p>
<figure class="wp-block-table"><table><tbody>
<tr><td><strong>CAFÉ DA MANHÃ</strong></td></tr>
<tr><td>Café com leite<br>Pão francês <img src="https://pra.ufpr.br/ru/files/vegano.png" alt=""></td></tr>
<tr><td><strong>ALMOÇO</strong></td></tr>
<tr><td>Arroz branco<br/>Feijão preto <img src="v.png"><img src="g.png"><br/>Frango assado</td></tr>
<tr><td>Salada de alface</td></tr>
<tr><td><strong>JANTAR</strong></td></tr>
<tr><td>Sopa de legumes</td></tr>
</tbody></table></figure>
<p><strong>Terça-feira 26/03/24</strong></p>
<figure class="wp-block-table"><table><tbody>
<tr><td><strong>ALMOÇO</strong></td></tr>
<tr><td>Macarrão ao sugo</td></tr>
</tbody></table></figure>
</div>
</body>
</html>
"""


@pytest.fixture
def menu_page_html():
    return SAMPLE_MENU_PAGE


@pytest.fixture
def make_response():
    """Factory building real requests.Response objects without touching the network."""

    def _make(status_code=200, body="", content_type="text/html; charset=UTF-8", url=JARDIM_BOTANICO.url):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode('utf-8')
        response.headers['Content-Type'] = content_type
        response.url = url
        if 'charset' in content_type.lower():
            response.encoding = 'utf-8'
        return response

    return _make


@pytest.fixture
def menu_session(make_response, menu_page_html):
    """A session whose GET always returns the sample menu page."""
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = make_response(body=menu_page_html)
    return session

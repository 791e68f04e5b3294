"""
Configuracoes e constantes compartilhadas do cliente GeoNetwork.
"""

# Chaves de configuracao do catalogo
CSW_URL_KEY = "csw.endpoint.url"
CSW_USER_KEY = "csw.endpoint.user"
CSW_PASS_KEY = "csw.endpoint.pass"
CSW_PARENT_KEY = "csw.identifier.parent"
CSW_TIMEOUT_KEY = "csw.timeout"

REQUIRED_KEYS = (CSW_URL_KEY, CSW_USER_KEY, CSW_PASS_KEY)

# Sufixos dos servicos do GeoNetwork
CSW_PATH = "/srv/eng/csw"
LOGIN_PATH = "/srv/eng/xml.user.login"
LOGOUT_PATH = "/srv/eng/xml.user.logout"

# Content types
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"
XML_CONTENT_TYPE = "application/xml; charset=UTF-8"

# Headers padrão para requisições HTTP
DEFAULT_HEADERS = {
    "User-Agent": "geonetwork-session/1.0",
    "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
    "Accept-Encoding": "gzip, deflate",
}

# Configurações de tempo
DEFAULT_TIMEOUT = 30
SELF_EXPIRE_HOURS = 1

# Pool de conexoes compartilhado pelas requisicoes de uma sessao
DEFAULT_POOL_SIZE = 10

# Tamanho maximo de corpo de resposta registrado em log
MAX_LOGGED_BODY = 2000

CSW_VERSION = "2.0.2"

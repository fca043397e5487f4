"""
Validadores e Formatadores de Documentos.

Funções puras, sem estado, usadas pelos use cases de usuário:
- validar_cpf: formato + dígitos verificadores
- validar_telefone: formato canônico (XX) XXXXX-XXXX
- formatar_cpf / formatar_telefone: pontuação canônica

Os formatadores devolvem a entrada original quando ela não tem
exatamente 11 dígitos. Quem chama não deve supor que a saída está
sempre no formato canônico.
"""

import re


# Apenas dígitos ASCII: \d do Python aceita dígitos Unicode (ex: ١٢٣)
CPF_FORMATO_REGEX = re.compile(r"^([0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}|[0-9]{11})$")
TELEFONE_FORMATO_REGEX = re.compile(r"^\([0-9]{2}\) [0-9]{5}-[0-9]{4}$")
NAO_DIGITO_REGEX = re.compile(r"[^0-9]")

CPF_TAMANHO = 11
TELEFONE_TAMANHO = 11


def _somente_digitos(valor: str) -> str:
    return NAO_DIGITO_REGEX.sub("", valor)


def _digito_verificador(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * (peso_inicial - i) for i, d in enumerate(digitos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def calcular_digitos_cpf(base: str) -> str:
    """
    Calcula os dois dígitos verificadores de um CPF.

    Args:
        base: Os 9 primeiros dígitos do CPF

    Returns:
        String com os 2 dígitos verificadores

    Raises:
        ValueError: Se base não tiver exatamente 9 dígitos

    Example:
        >>> calcular_digitos_cpf("123456789")
        '09'
    """
    if len(base) != 9 or not (base.isascii() and base.isdigit()):
        raise ValueError(f"Base do CPF deve ter 9 dígitos: {base!r}")

    primeiro = _digito_verificador(base, 10)
    segundo = _digito_verificador(base + str(primeiro), 11)
    return f"{primeiro}{segundo}"


def validar_cpf(cpf: str) -> bool:
    """
    Valida CPF pelo formato e pelos dígitos verificadores.

    Aceita apenas ``XXX.XXX.XXX-XX`` ou 11 dígitos sem pontuação.
    CPFs com todos os dígitos iguais (ex: 111.111.111-11) passam no
    cálculo mas são rejeitados.

    Args:
        cpf: CPF a validar

    Returns:
        True se válido, False caso contrário
    """
    if not isinstance(cpf, str) or not CPF_FORMATO_REGEX.fullmatch(cpf):
        return False

    digitos = _somente_digitos(cpf)

    if len(set(digitos)) == 1:
        return False

    return digitos[9:] == calcular_digitos_cpf(digitos[:9])


def validar_telefone(telefone: str) -> bool:
    """Verifica se o telefone está exatamente no formato (XX) XXXXX-XXXX."""
    if not isinstance(telefone, str):
        return False
    return TELEFONE_FORMATO_REGEX.fullmatch(telefone) is not None


def formatar_cpf(cpf: str) -> str:
    """
    Formata CPF como XXX.XXX.XXX-XX.

    Returns:
        CPF formatado, ou a entrada inalterada se não tiver 11 dígitos
    """
    if not isinstance(cpf, str):
        return cpf

    digitos = _somente_digitos(cpf)

    if len(digitos) != CPF_TAMANHO:
        return cpf

    return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:]}"


def formatar_telefone(telefone: str) -> str:
    """
    Formata telefone como (XX) XXXXX-XXXX.

    Returns:
        Telefone formatado, ou a entrada inalterada se não tiver 11 dígitos
    """
    if not isinstance(telefone, str):
        return telefone

    digitos = _somente_digitos(telefone)

    if len(digitos) != TELEFONE_TAMANHO:
        return telefone

    return f"({digitos[:2]}) {digitos[2:7]}-{digitos[7:]}"


def normalizar_telefone(telefone: str) -> str:
    """
    Coloca o telefone no formato canônico se ainda não estiver.

    Entradas que não são canônicas nem têm 11 dígitos voltam como
    vieram e falham em ``validar_telefone`` logo depois.
    """
    if validar_telefone(telefone):
        return telefone
    return formatar_telefone(telefone)

"""
Módulo utilitário para validação e normalização de CPF.
Funções puras, sem estado: seguras para chamadas concorrentes.
"""
import re

_NON_DIGITS = re.compile(r'[^0-9]')


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres não numéricos do CPF (pontuação, letras, unicode).
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos 0-9, na ordem original
        Exemplo: '529.982.247-25' -> '52998224725'
        """
        return _NON_DIGITS.sub('', cpf)

    @staticmethod
    def has_all_same_digits(cpf: str) -> bool:
        """
        Indica se todos os dígitos do CPF são iguais (ex.: 111.111.111-11).
        Parâmetros:
            cpf (str): CPF normalizado
        Retorno:
            bool: True se todos os caracteres forem iguais ao primeiro
        """
        return all(c == cpf[0] for c in cpf)

    @staticmethod
    def calculate_verification_digit(cpf: str, position: int) -> int:
        """
        Calcula o dígito verificador esperado na posição informada.
        Os pesos começam em position + 1 e decrescem até 2.
        Parâmetros:
            cpf (str): CPF normalizado
            position (int): 9 para o primeiro dígito, 10 para o segundo
        Retorno:
            int: dígito esperado (0-9)
        """
        soma = sum(int(digit) * weight for digit, weight in zip(cpf[:position], range(position + 1, 1, -1)))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Nunca lança exceção: entradas que não são str retornam False.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            bool: True se válido, False caso contrário
        """
        if not isinstance(cpf, str):
            return False
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != 11:
            return False
        # Sequências repetidas (000..., 111...) são reservadas e sempre inválidas
        if CPFUtils.has_all_same_digits(cpf):
            return False
        # O segundo dígito usa o primeiro já verificado como entrada
        for position in (9, 10):
            if CPFUtils.calculate_verification_digit(cpf, position) != int(cpf[position]):
                return False
        return True

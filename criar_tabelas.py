from app import create_app
from app.extensions import db

# Todos os modelos precisam estar importados antes do create_all
from app import models  # noqa: F401

app = create_app()


def inicializar_bd(apagar=True):
    with app.app_context():
        try:
            if apagar:
                print("🗑️  Apagando tabelas antigas...")
                db.drop_all()
            print("🏗️  Criando tabelas (clientes, equipamentos, ordensDeServico...)")
            db.create_all()
        except UnicodeDecodeError as e:
            print("\n❌ ERRO DE CODIFICAÇÃO NA CONEXÃO COM O BANCO")
            print("   A senha ou o usuário no '.env' tem caracteres especiais (acentos, ç...).")
            print("   Substitua esses caracteres pelo código URL (ex.: 'ç' -> '%C3%A7').")
            print(f"   Detalhe do erro: {e}")
            return
        except Exception as e:
            print(f"\n❌ Erro inesperado ao conectar com o banco: {e}")
            return

        print("🌱 Gravando dados iniciais das empresas...")
        criadas = app.extensions['goldmaq'].empresas.semear()

        print("\n✅ Banco inicializado com sucesso!")
        print("-" * 50)
        for empresa in app.extensions['goldmaq'].empresas.listar():
            marca = '+' if empresa['id'] in criadas else '='
            print(f"   {marca} {empresa['id']}: {empresa['name']} ({empresa['cnpj']})")


if __name__ == "__main__":
    import sys
    inicializar_bd(apagar='--manter' not in sys.argv)

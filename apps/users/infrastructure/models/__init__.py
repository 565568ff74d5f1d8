from .user_model import UserModel, UserModelManager

__all__ = ['UserModel', 'UserModelManager']
